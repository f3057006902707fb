"""One round of play: the drawn letters, their solution, and what was found."""
from dataclasses import dataclass
import logging

from wordrush.core.scorecard import ScoreCard
from wordrush.core.solver import RoundSolution
from wordrush.core.tile_generator import LetterBag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordResult:
    word: str
    found: bool


@dataclass(frozen=True)
class RoundSummary:
    """The revealed solution at round end, grouped by word length."""
    round_number: int
    letters: tuple[str, ...]
    groups: dict[int, list[WordResult]]
    found_count: int
    total_count: int

    @property
    def missed_count(self) -> int:
        return self.total_count - self.found_count

    @property
    def success_percentage(self) -> int:
        if self.total_count == 0:
            return 0
        return round(self.found_count * 100 / self.total_count)


class Round:
    def __init__(self, number: int, bag: LetterBag, solution: RoundSolution) -> None:
        self.number = number
        self.bag = bag
        self.solution = solution
        self.score_card = ScoreCard(solution)
        self.frozen = False

    @property
    def found_words(self) -> list[str]:
        return self.score_card.found_words

    @property
    def longest_words_found(self) -> set[str]:
        return self.score_card.longest_words_found

    def freeze(self) -> None:
        self.frozen = True

    def summary(self) -> RoundSummary:
        groups = {
            length: [WordResult(word, self.score_card.is_found(word)) for word in words]
            for length, words in self.solution.by_length().items()
        }
        return RoundSummary(
            round_number=self.number,
            letters=self.bag.symbols,
            groups=groups,
            found_count=len(self.found_words),
            total_count=len(self.solution),
        )
