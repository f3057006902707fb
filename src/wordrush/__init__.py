"""Word rush: a timed word-finding game engine over a ten-letter bag."""

from .core.dictionary import Lexicon, load_lexicon
from .core.solver import RoundSolution, solve
from .core.tile_generator import LetterBag, LetterGenerator, SamplingPolicy
from .game.game_coordinator import GameCoordinator
from .game.game_state import GamePhase, SubmitOutcome

__all__ = [
    "Lexicon",
    "load_lexicon",
    "RoundSolution",
    "solve",
    "LetterBag",
    "LetterGenerator",
    "SamplingPolicy",
    "GameCoordinator",
    "GamePhase",
    "SubmitOutcome",
]
