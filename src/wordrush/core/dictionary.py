import logging
from typing import Iterable, Iterator, Optional

from wordrush.config import game_config
from wordrush.core import alphabet

logger = logging.getLogger(__name__)


class Lexicon:
    """The normalized word list every round is solved against.

    Words keep their first-seen order so solving is deterministic; membership
    goes through a set. Never mutated once play starts.
    """
    @classmethod
    def from_words(cls, words: Iterable[str], min_letters: int = game_config.MIN_WORD_LENGTH) -> 'Lexicon':
        """Create a lexicon from a word list without file I/O."""
        lexicon = cls(min_letters)
        lexicon.add_words(words)
        return lexicon

    @classmethod
    def fallback(cls) -> 'Lexicon':
        return cls.from_words(game_config.FALLBACK_WORDS)

    def __init__(self, min_letters: int = game_config.MIN_WORD_LENGTH) -> None:
        self._min_letters = min_letters
        self._all_words: set[str] = set()
        self._ordered: list[str] = []
        self.used_fallback = False

    def add_words(self, words: Iterable[str]) -> None:
        for line in words:
            word = alphabet.normalize_word(line)
            if len(word) < self._min_letters or word in self._all_words:
                continue
            self._all_words.add(word)
            self._ordered.append(word)

    def use_fallback(self) -> None:
        self._all_words.clear()
        self._ordered.clear()
        self.add_words(game_config.FALLBACK_WORDS)
        self.used_fallback = True

    def is_word(self, word: str) -> bool:
        return word in self._all_words

    def words(self) -> list[str]:
        return list(self._ordered)

    def __contains__(self, word: object) -> bool:
        return word in self._all_words

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)


def load_lexicon(text: Optional[str]) -> Lexicon:
    """Build a lexicon from dictionary text, soft-failing to the fallback words.

    `text` is None when every dictionary source failed; an empty result after
    normalization is treated the same way.
    """
    if text is None:
        logger.warning("load_lexicon: no dictionary text available; using fallback words")
        lexicon = Lexicon.fallback()
        lexicon.used_fallback = True
        return lexicon
    lexicon = Lexicon.from_words(text.splitlines())
    if not len(lexicon):
        logger.warning("load_lexicon: dictionary had no usable words; using fallback words")
        lexicon.use_fallback()
    else:
        logger.info(f"load_lexicon: {len(lexicon)} words")
    return lexicon
