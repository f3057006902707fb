"""
Static letter inventory for the game.

TERMINOLOGY:
- Letter: one grapheme of the 29-letter Turkish alphabet with its frequency
  weight and vowel/consonant class. Immutable, built once at import.
- Pool: the vowel letters or the consonant letters, sampled separately.

CASING:
Turkish has dotted and dotless i as separate letters, so str.lower() and
str.upper() are wrong for 'I' and 'i'. turkish_lower/turkish_upper map those
two explicitly before falling back to the builtin casing.
"""
from dataclasses import dataclass

from wordrush.config import game_config


@dataclass(frozen=True)
class Letter:
    symbol: str
    weight: float
    is_vowel: bool


def _build_letters() -> dict[str, Letter]:
    letters = {}
    for symbol in game_config.VOWELS:
        letters[symbol] = Letter(symbol, _weight_of(symbol), True)
    for symbol in game_config.CONSONANTS:
        letters[symbol] = Letter(symbol, _weight_of(symbol), False)
    return letters


def _weight_of(symbol: str) -> float:
    return game_config.LETTER_FREQUENCIES.get(symbol, game_config.DEFAULT_LETTER_WEIGHT)


ALPHABET: dict[str, Letter] = _build_letters()
VOWEL_POOL: tuple[Letter, ...] = tuple(ALPHABET[s] for s in game_config.VOWELS)
CONSONANT_POOL: tuple[Letter, ...] = tuple(ALPHABET[s] for s in game_config.CONSONANTS)

_LOWER_MAP = str.maketrans({'I': 'ı', 'İ': 'i'})
_UPPER_MAP = str.maketrans({'i': 'İ', 'ı': 'I'})
_CIRCUMFLEX_MAP = str.maketrans(game_config.CIRCUMFLEX_MAP)

# Turkish collation order for sorting words the way a Turkish reader expects
_COLLATION = "abcçdefgğhıijklmnoöprsştuüvyz"
_COLLATION_RANK = {c: i for i, c in enumerate(_COLLATION)}


def turkish_lower(text: str) -> str:
    return text.translate(_LOWER_MAP).lower()


def turkish_upper(text: str) -> str:
    return text.translate(_UPPER_MAP).upper()


def collapse_circumflex(text: str) -> str:
    """Map â/î/û (and upper-case variants) to their plain vowels, preserving case."""
    return text.translate(_CIRCUMFLEX_MAP)


def normalize_word(raw: str) -> str:
    """Normalize a dictionary entry or player input to its canonical form."""
    return turkish_lower(collapse_circumflex(raw.strip()))


def collation_key(word: str) -> tuple:
    """Sort key ordering words alphabetically by Turkish collation."""
    return tuple(_COLLATION_RANK.get(c, len(_COLLATION) + ord(c)) for c in word)


def is_vowel(symbol: str) -> bool:
    letter = ALPHABET.get(symbol)
    return letter is not None and letter.is_vowel


def is_consonant(symbol: str) -> bool:
    letter = ALPHABET.get(symbol)
    return letter is not None and not letter.is_vowel
