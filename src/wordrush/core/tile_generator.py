import random
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from wordrush.config import game_config
from wordrush.core import alphabet
from wordrush.core.alphabet import Letter

logger = logging.getLogger(__name__)


class SamplingPolicy(str, Enum):
    """How letters are drawn from a pool."""
    LIMITED_REPEAT = "limited_repeat"  # Weighted draw with replacement, each letter at most twice
    UNIQUE = "unique"  # Weighted sampling without replacement


@dataclass(frozen=True)
class LetterBag:
    """The ordered letters available for one round."""
    symbols: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def letters(self) -> str:
        return "".join(self.symbols)

    def counts(self) -> Counter:
        return Counter(self.symbols)

    def vowel_count(self) -> int:
        return sum(1 for s in self.symbols if alphabet.is_vowel(s))

    def consonant_count(self) -> int:
        return sum(1 for s in self.symbols if alphabet.is_consonant(s))

    def display(self) -> list[str]:
        return [alphabet.turkish_upper(s) for s in self.symbols]


class LetterGenerator:
    """
    Centralized service for generating letter bags and managing RNG state.
    A seeded generator yields the same sequence of bags, so a session can be
    replayed from its logged seed.
    """
    def __init__(self,
                 policy: SamplingPolicy = SamplingPolicy.LIMITED_REPEAT,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.policy = SamplingPolicy(policy)
        self._rng = rng or random.Random(seed)

    def generate(self) -> LetterBag:
        """Draw vowels and consonants by frequency weight, then shuffle them together."""
        vowels = self._sample(alphabet.VOWEL_POOL, game_config.BAG_VOWELS)
        consonants = self._sample(alphabet.CONSONANT_POOL, game_config.BAG_CONSONANTS)
        symbols = vowels + consonants
        self._rng.shuffle(symbols)
        bag = LetterBag(tuple(symbols))
        logger.debug(f"generate: {bag.letters()} ({self.policy.value})")
        return bag

    def _sample(self, pool: Sequence[Letter], count: int) -> list[str]:
        if self.policy is SamplingPolicy.UNIQUE:
            return self._sample_unique(pool, count)
        return self._sample_limited_repeat(pool, count)

    def _pick_index(self, weights: Sequence[float]) -> int:
        target = self._rng.random() * sum(weights)
        for index, weight in enumerate(weights):
            target -= weight
            if target <= 0:
                return index
        return len(weights) - 1

    def _sample_limited_repeat(self, pool: Sequence[Letter], count: int) -> list[str]:
        weights = [letter.weight for letter in pool]
        picked: list[str] = []
        picked_counts: Counter = Counter()
        for _ in range(count):
            for _attempt in range(game_config.MAX_PICK_ATTEMPTS):
                symbol = pool[self._pick_index(weights)].symbol
                if picked_counts[symbol] < game_config.MAX_LETTER_REPEATS:
                    break
            else:
                logger.info(f"_sample_limited_repeat: forcing repeated letter {symbol}")
            picked.append(symbol)
            picked_counts[symbol] += 1
        return picked

    def _sample_unique(self, pool: Sequence[Letter], count: int) -> list[str]:
        remaining = list(pool)
        picked: list[str] = []
        while remaining and len(picked) < count:
            index = self._pick_index([letter.weight for letter in remaining])
            picked.append(remaining.pop(index).symbol)
        return picked
