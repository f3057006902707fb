"""Builders for games wired to recorders instead of a real presenter."""
import logging
from typing import Iterable, Optional, Sequence

from wordrush.config.game_params import GameParams
from wordrush.core.tile_generator import LetterBag, LetterGenerator
from wordrush.game.game_state import MultiplayerGame, Session, SinglePlayerGame
from wordrush.game.player import Player
from wordrush.game.time_provider import MockTimeProvider
from tests.fixtures.dictionary_helpers import SCENARIO_BAG, SCENARIO_DICT, create_test_lexicon

logger = logging.getLogger(__name__)

# Long enough that the background timer task never fires during a test
NEVER_S = 3600.0


class EventRecorder:
    """Stands in for an EventEngine and keeps every triggered event."""
    def __init__(self) -> None:
        self.events = []

    def trigger(self, event) -> None:
        self.events.append(event)

    def of_type(self, event_class) -> list:
        return [e for e in self.events if isinstance(e, event_class)]

    def clear(self) -> None:
        self.events = []


class FixedLetterGenerator(LetterGenerator):
    """Hands out the given bags in order, repeating the last one."""
    def __init__(self, bags: Sequence[LetterBag]) -> None:
        super().__init__(seed=0)
        self._bags = list(bags)
        self.generated = 0

    def generate(self) -> LetterBag:
        bag = self._bags[min(self.generated, len(self._bags) - 1)]
        self.generated += 1
        return bag


def make_params(mode: str = "single", **overrides) -> GameParams:
    values = dict(mode=mode, tick_interval_s=NEVER_S, turn_switch_delay_s=0.0, seed=1)
    values.update(overrides)
    return GameParams(**values)


def create_single_player_game(words: Iterable[str] = SCENARIO_DICT,
                              bag: LetterBag = SCENARIO_BAG,
                              **overrides):
    params = make_params("single", **overrides)
    session = Session("single", [Player("Oyuncu")], total_rounds=1, turns_per_round=0)
    recorder = EventRecorder()
    game = SinglePlayerGame(session, params, create_test_lexicon(list(words)),
                            FixedLetterGenerator([bag]), recorder, MockTimeProvider())
    return game, recorder


def create_multiplayer_game(names: Sequence[str] = ("Ali", "Ayşe"),
                            words: Iterable[str] = SCENARIO_DICT,
                            bags: Optional[Sequence[LetterBag]] = None,
                            **overrides):
    params = make_params("multiplayer", **overrides)
    session = Session("multiplayer", [Player(n) for n in names],
                      total_rounds=params.rounds, turns_per_round=params.turns_per_round)
    recorder = EventRecorder()
    game = MultiplayerGame(session, params, create_test_lexicon(list(words)),
                           FixedLetterGenerator(bags or [SCENARIO_BAG]), recorder, MockTimeProvider())
    return game, recorder


async def expire(countdown) -> None:
    """Tick a running (unpaused) countdown until it runs out."""
    assert not countdown.paused
    while not countdown.finished:
        await countdown.tick()
