"""Game parameter configuration for a single play session."""
import argparse
import json
from dataclasses import dataclass
from typing import Optional

from wordrush.config import game_config

MODES = ("single", "multiplayer")
SAMPLING_POLICIES = ("limited_repeat", "unique")


@dataclass
class GameParams:
    """Configuration parameters for a game session.

    These parameters are chosen at mode/setup selection and stay fixed for the
    whole session.
    """
    mode: str = "single"
    rounds: int = game_config.DEFAULT_ROUNDS
    turns_per_round: int = game_config.DEFAULT_TURNS_PER_ROUND
    single_player_time: int = game_config.SINGLE_PLAYER_TIME
    turn_time: int = game_config.TURN_TIME
    tick_interval_s: float = game_config.TICK_INTERVAL_S
    turn_switch_delay_s: float = game_config.TURN_SWITCH_DELAY_S
    sampling: str = "limited_repeat"
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ValueError if any parameter is out of range."""
        if self.mode not in MODES:
            raise ValueError(f"unknown mode: {self.mode}")
        if self.sampling not in SAMPLING_POLICIES:
            raise ValueError(f"unknown sampling policy: {self.sampling}")
        if self.rounds < 1:
            raise ValueError("rounds must be at least 1")
        if self.turns_per_round < 1:
            raise ValueError("turns_per_round must be at least 1")
        if self.single_player_time < 1 or self.turn_time < 1:
            raise ValueError("timer budgets must be positive")
        if self.tick_interval_s <= 0:
            raise ValueError("tick_interval_s must be positive")

    @classmethod
    def from_json(cls, json_str: str) -> Optional['GameParams']:
        """Create GameParams from JSON string.

        Args:
            json_str: JSON string containing game parameters

        Returns:
            GameParams instance, or None if json_str is empty/None

        Raises:
            json.JSONDecodeError: If json_str is invalid JSON
        """
        if not json_str or json_str.strip() == "":
            return None

        data = json.loads(json_str)

        return cls(
            mode=data.get('mode', 'single'),
            rounds=data.get('rounds', game_config.DEFAULT_ROUNDS),
            turns_per_round=data.get('turns_per_round', game_config.DEFAULT_TURNS_PER_ROUND),
            single_player_time=data.get('single_player_time', game_config.SINGLE_PLAYER_TIME),
            turn_time=data.get('turn_time', game_config.TURN_TIME),
            tick_interval_s=data.get('tick_interval', game_config.TICK_INTERVAL_S),
            turn_switch_delay_s=data.get('turn_switch_delay', game_config.TURN_SWITCH_DELAY_S),
            sampling=data.get('sampling', 'limited_repeat'),
            seed=data.get('seed'),
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'GameParams':
        """Create GameParams from argparse Namespace.

        Args:
            args: Parsed command-line arguments

        Returns:
            GameParams instance with values from args
        """
        return cls(
            mode=args.mode,
            rounds=args.rounds,
            turns_per_round=args.turns,
            tick_interval_s=args.tick_interval,
            sampling=args.sampling,
            seed=args.seed,
        )

    def __str__(self) -> str:
        """Return string representation for logging."""
        return (f"GameParams(mode={self.mode}, rounds={self.rounds}, "
                f"turns={self.turns_per_round}, single_time={self.single_player_time}, "
                f"turn_time={self.turn_time}, tick={self.tick_interval_s}, "
                f"sampling={self.sampling}, seed={self.seed})")
