from collections import Counter
from dataclasses import dataclass, field
import logging
from typing import Iterable

from wordrush.config import game_config
from wordrush.core import alphabet

logger = logging.getLogger(__name__)


def can_form(word: str, letters: Iterable[str]) -> bool:
    """True if every letter of `word` can be taken from `letters`, each copy used once."""
    available = Counter(letters)
    for letter in word:
        if available[letter] <= 0:
            return False
        available[letter] -= 1
    return True


def missing_letters(word: str, letters: Iterable[str]) -> str:
    available = Counter(letters)
    word_hash = Counter(word)
    return "".join(l for l in word_hash if word_hash[l] > available[l])


@dataclass(frozen=True)
class RoundSolution:
    """Every word formable from a round's bag, solved before play starts."""
    words: tuple[str, ...]
    max_length: int
    word_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_set", frozenset(self.words))

    def __contains__(self, word: object) -> bool:
        return word in self.word_set

    def __len__(self) -> int:
        return len(self.words)

    def longest_words(self) -> list[str]:
        return [w for w in self.words if len(w) == self.max_length]

    def by_length(self) -> dict[int, list[str]]:
        """Words grouped by length (ascending), alphabetical within each group."""
        groups: dict[int, list[str]] = {}
        for word in self.words:
            groups.setdefault(len(word), []).append(word)
        return {length: sorted(groups[length], key=alphabet.collation_key)
                for length in sorted(groups)}


def solve(bag: Iterable[str], lexicon: Iterable[str]) -> RoundSolution:
    letters = list(bag)
    words = tuple(word for word in lexicon
                  if len(word) >= game_config.MIN_WORD_LENGTH and can_form(word, letters))
    max_length = max((len(w) for w in words), default=0)
    logger.info(f"solve: {''.join(letters)} -> {len(words)} words, longest {max_length}")
    return RoundSolution(words, max_length)
