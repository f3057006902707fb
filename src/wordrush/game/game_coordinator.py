import dataclasses
import logging
import random
from typing import Iterable, Optional

from wordrush.config import game_config
from wordrush.config.game_params import GameParams
from wordrush.core.dictionary import Lexicon
from wordrush.core.tile_generator import LetterGenerator, SamplingPolicy
from wordrush.game.game_state import (
    Game, GamePhase, MultiplayerGame, Session, SinglePlayerGame, SubmitOutcome
)
from wordrush.game.player import Player
from wordrush.game.time_provider import SystemTimeProvider, TimeProvider
from wordrush.game_logging.game_loggers import GameLogger, OutputLogger
from wordrush.utils.pygameasync import EventEngine

logger = logging.getLogger(__name__)

SOLO_PLAYER_NAME = "Oyuncu"


def validate_player_names(names: Iterable[str]) -> Optional[list[str]]:
    """Clean up the setup form's names; None if the setup must be rejected.

    Blank entries are dropped, names are cut to the maximum length and only
    the first MAX_PLAYERS entries count. Fewer than MIN_PLAYERS names, or two
    names that differ only by case, reject the setup.
    """
    cleaned = [name.strip()[:game_config.MAX_NAME_LENGTH] for name in names if name and name.strip()]
    cleaned = cleaned[:game_config.MAX_PLAYERS]
    if len(cleaned) < game_config.MIN_PLAYERS:
        logger.info(f"validate_player_names: only {len(cleaned)} players")
        return None
    folded = [name.casefold() for name in cleaned]
    if len(set(folded)) != len(folded):
        logger.info(f"validate_player_names: duplicate names in {cleaned}")
        return None
    return cleaned


class GameCoordinator:
    """Manages mode selection, session setup, and the game lifecycle."""

    def __init__(self,
                 lexicon: Lexicon,
                 events: Optional[EventEngine] = None,
                 time_provider: Optional[TimeProvider] = None,
                 game_logger: Optional[GameLogger] = None,
                 output_logger: Optional[OutputLogger] = None) -> None:
        self.lexicon = lexicon
        self.events = events or EventEngine()
        self.time_provider = time_provider or SystemTimeProvider()
        self.game_logger = game_logger or GameLogger(None)
        self.output_logger = output_logger or OutputLogger(None)
        self.game: Optional[Game] = None
        self.session: Optional[Session] = None
        self._setup_mode = False

    @property
    def phase(self) -> GamePhase:
        if self.game is not None:
            return self.game.phase
        return GamePhase.SETUP if self._setup_mode else GamePhase.IDLE

    def open_setup(self) -> None:
        """Show the multiplayer setup screen."""
        self._setup_mode = True

    def _make_generator(self, params: GameParams) -> LetterGenerator:
        """Seed the session; `params` must be this session's own copy."""
        if params.seed is None:
            params.seed = random.randrange(2**32)
        self.game_logger.log_seed(params.seed)
        self.game_logger.log_params(str(params))
        return LetterGenerator(SamplingPolicy(params.sampling), seed=params.seed)

    async def _discard_game(self) -> None:
        if self.game is not None:
            await self.game.stop()
        self.game = None
        self.session = None

    async def start_single_player(self, params: Optional[GameParams] = None,
                                  name: str = SOLO_PLAYER_NAME) -> SinglePlayerGame:
        params = dataclasses.replace(params or GameParams(), mode="single")
        params.validate()
        await self._discard_game()
        self._setup_mode = False

        self.session = Session("single", [Player(name)], total_rounds=1,
                               turns_per_round=0, seed=params.seed)
        game = SinglePlayerGame(self.session, params, self.lexicon, self._make_generator(params),
                                self.events, self.time_provider, self.output_logger)
        self.session.seed = params.seed
        self.game = game
        logger.info(f"start_single_player: {params}")
        await game.start_round()
        return game

    async def start_multiplayer(self, names: Iterable[str],
                                params: Optional[GameParams] = None) -> bool:
        """Start a multiplayer session; False leaves the caller on the setup screen."""
        params = dataclasses.replace(params or GameParams(), mode="multiplayer")
        params.validate()
        player_names = validate_player_names(names)
        if player_names is None:
            self._setup_mode = True
            return False
        await self._discard_game()
        self._setup_mode = False

        self.session = Session("multiplayer", [Player(n) for n in player_names],
                               total_rounds=params.rounds,
                               turns_per_round=params.turns_per_round)
        game = MultiplayerGame(self.session, params, self.lexicon, self._make_generator(params),
                               self.events, self.time_provider, self.output_logger)
        self.session.seed = params.seed
        self.game = game
        logger.info(f"start_multiplayer: {player_names} {params}")
        await game.start_round()
        return True

    async def submit_word(self, raw: str) -> SubmitOutcome:
        if self.game is None:
            return SubmitOutcome.INACTIVE
        outcome = await self.game.submit_word(raw)
        self.game_logger.log_events(self.time_provider.get_ticks(),
                                    {"submit": raw, "outcome": outcome.value})
        return outcome

    def input_changed(self, buffer: str) -> None:
        if isinstance(self.game, MultiplayerGame):
            self.game.input_changed(buffer)

    def show_scoreboard(self) -> list[Player]:
        if isinstance(self.game, MultiplayerGame):
            return self.game.show_scoreboard()
        return list(self.session.players) if self.session else []

    async def continue_session(self) -> None:
        if isinstance(self.game, MultiplayerGame):
            await self.game.continue_session()

    async def return_to_main_menu(self) -> None:
        """Cancel any pending timer and drop all session state."""
        logger.info("return_to_main_menu")
        await self._discard_game()
        self._setup_mode = False
