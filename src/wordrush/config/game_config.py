"""Centralized configuration for the word rush game: alphabet, timing, scoring, and dictionary sources."""

import os

# ============================================================================
# ALPHABET SETTINGS
# ============================================================================
# Turkish letter frequencies (percent of letters in running text)
LETTER_FREQUENCIES = {
    'a': 11.92, 'e': 8.91, 'i': 8.60, 'n': 7.48, 'r': 6.95,
    'l': 5.75, 't': 5.54, 'k': 4.68, 's': 4.59, 'u': 4.34,
    'm': 3.75, 'd': 3.74, 'o': 3.51, 'y': 3.49, 'b': 2.85,
    'ı': 2.77, 'z': 2.75, 'v': 2.25, 'g': 2.18, 'h': 1.85,
    'p': 1.64, 'ş': 1.58, 'c': 1.45, 'ç': 1.13, 'f': 0.84,
    'ö': 0.78, 'ü': 0.69, 'ğ': 0.68, 'j': 0.25
}
DEFAULT_LETTER_WEIGHT = 1.0

VOWELS = ['a', 'e', 'ı', 'i', 'o', 'ö', 'u', 'ü']
CONSONANTS = ['b', 'c', 'ç', 'd', 'f', 'g', 'ğ', 'h', 'j', 'k', 'l', 'm',
              'n', 'p', 'r', 's', 'ş', 't', 'v', 'y', 'z']

# Circumflex variants collapse to their plain vowel
CIRCUMFLEX_MAP = {'â': 'a', 'Â': 'A', 'î': 'i', 'Î': 'İ', 'û': 'u', 'Û': 'U'}

# ============================================================================
# LETTER BAG SETTINGS
# ============================================================================
BAG_VOWELS = 4
BAG_CONSONANTS = 6
BAG_SIZE = BAG_VOWELS + BAG_CONSONANTS
MAX_LETTER_REPEATS = 2  # Per pool, limited-repeat sampling
MAX_PICK_ATTEMPTS = 100  # Redraws before a repeated letter is force-accepted

# ============================================================================
# GAME LOGIC SETTINGS
# ============================================================================
MIN_WORD_LENGTH = 4
POINTS_PER_LETTER = 10
BONUS_MULTIPLIER = 2

MIN_PLAYERS = 2
MAX_PLAYERS = 5
MAX_NAME_LENGTH = 15
ROUND_CHOICES = (1, 2, 3, 4, 5)
DEFAULT_ROUNDS = 3
DEFAULT_TURNS_PER_ROUND = 5

# Timing settings (ticks of TICK_INTERVAL_S seconds)
SINGLE_PLAYER_TIME = 100
TURN_TIME = 5
TICK_INTERVAL_S = float(os.environ.get("WORDRUSH_TICK_INTERVAL_S", "1.0"))
TURN_SWITCH_DELAY_S = 0.2  # Pause between one player's turn and the next
TIMER_WARNING_SINGLE = 10  # Remaining ticks at which the single-player clock warns
TIMER_WARNING_TURN = 3

# ============================================================================
# DICTIONARY SETTINGS
# ============================================================================
DATA_DIR = "assets/data"
DICTIONARY_PATH = os.environ.get("WORDRUSH_DICTIONARY",
                                 os.path.join(DATA_DIR, "turkce_kelime_listesi.txt"))
DICTIONARY_URLS = [
    url for url in os.environ.get("WORDRUSH_DICTIONARY_URLS", "").split(",") if url.strip()
]
DICTIONARY_TIMEOUT_S = 10.0
FALLBACK_WORDS = ['test', 'kelime', 'oyun', 'deneme']

# ============================================================================
# DEFINITION LOOKUP SETTINGS
# ============================================================================
TDK_URL = "https://sozluk.gov.tr/gts?ara={word}"
DEFINITION_PROXIES = [
    "https://api.allorigins.win/get?url={url}",
    "https://corsproxy.io/?{url}",
    "https://api.codetabs.com/v1/proxy?quest={url}",
]
DEFINITION_TIMEOUT_S = 2.0

# ============================================================================
# PATH SETTINGS
# ============================================================================
LOG_DIR = os.environ.get("WORDRUSH_LOG_DIR")
