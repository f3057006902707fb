from enum import Enum
import logging

from wordrush.config import game_config
from wordrush.core.solver import RoundSolution

logger = logging.getLogger(__name__)

Play = Enum("Play", ["GOOD", "DUPE_WORD", "BAD_WORD"])


class ScoreCard:
    """Per-round referee: found words, bonus bookkeeping, and point values.

    Scoring is split in two: calculate_score() is a pure query and
    register_bonus() is the only place the bonus set changes. accept() does
    both, once, for a word judged GOOD.
    """
    def __init__(self, solution: RoundSolution) -> None:
        self.solution = solution
        self.found_words: list[str] = []
        self.longest_words_found: set[str] = set()

    def judge(self, word: str) -> Play:
        if word not in self.solution:
            return Play.BAD_WORD
        if word in self.found_words:
            return Play.DUPE_WORD
        return Play.GOOD

    def is_bonus_word(self, word: str) -> bool:
        return (self.solution.max_length > 0
                and len(word) == self.solution.max_length
                and word not in self.longest_words_found)

    def calculate_score(self, word: str) -> tuple[int, bool]:
        points = len(word) * game_config.POINTS_PER_LETTER
        if self.is_bonus_word(word):
            return points * game_config.BONUS_MULTIPLIER, True
        return points, False

    def register_bonus(self, word: str) -> None:
        if len(word) != self.solution.max_length or word not in self.solution:
            raise ValueError(f"{word} is not a longest word of this round")
        self.longest_words_found.add(word)

    def accept(self, word: str) -> tuple[int, bool]:
        play = self.judge(word)
        if play is not Play.GOOD:
            raise ValueError(f"cannot accept {word}: {play.name}")
        points, is_bonus = self.calculate_score(word)
        self.found_words.append(word)
        if is_bonus:
            self.register_bonus(word)
            logger.info(f"accept: bonus for longest word {word} ({len(word)} letters)")
        return points, is_bonus

    def is_found(self, word: str) -> bool:
        return word in self.found_words

    def get_found_words(self) -> list[str]:
        return list(self.found_words)
