"""Type-safe event definitions for the word rush game.

The engine never talks to a screen or speaker directly. Every observable
change is one of these dataclasses, triggered on an EventEngine and delivered
to whatever presenter is listening.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class EventType(str, Enum):
    """Event type identifiers, also used as listener names on the EventEngine."""

    LETTERS_READY = "round.letters_ready"
    WORD_ACCEPTED = "word.accepted"
    WORD_REJECTED = "word.rejected"
    TICK = "timer.tick"
    TURN_CHANGED = "turn.changed"
    ROUND_ENDED = "round.ended"
    SCOREBOARD_READY = "session.scoreboard_ready"
    SESSION_ENDED = "session.ended"


class RejectReason(str, Enum):
    WRONG = "wrong"
    DUPLICATE = "duplicate"


@dataclass
class GameEvent:
    """Base class for all game events."""
    event_type: EventType


# ============================================================================
# ROUND EVENTS
# ============================================================================

@dataclass
class LettersReadyEvent(GameEvent):
    """A new round's letters are drawn and solved; play can begin."""
    bag: Any  # tile_generator.LetterBag
    round_number: int
    now_ms: int

    def __init__(self, bag: Any, round_number: int, now_ms: int):
        super().__init__(EventType.LETTERS_READY)
        self.bag = bag
        self.round_number = round_number
        self.now_ms = now_ms


@dataclass
class RoundEndedEvent(GameEvent):
    """The round is over; the full solution is revealed."""
    summary: Any  # round.RoundSummary
    now_ms: int

    def __init__(self, summary: Any, now_ms: int):
        super().__init__(EventType.ROUND_ENDED)
        self.summary = summary
        self.now_ms = now_ms


# ============================================================================
# WORD EVENTS
# ============================================================================

@dataclass
class WordAcceptedEvent(GameEvent):
    """Triggered when a new valid word is found."""
    word: str
    points: int
    is_bonus: bool
    player: int
    now_ms: int

    def __init__(self, word: str, points: int, is_bonus: bool, player: int, now_ms: int):
        super().__init__(EventType.WORD_ACCEPTED)
        self.word = word
        self.points = points
        self.is_bonus = is_bonus
        self.player = player
        self.now_ms = now_ms


@dataclass
class WordRejectedEvent(GameEvent):
    """Triggered when a word is not in the solution or was already found."""
    reason: RejectReason
    word: str
    player: int
    now_ms: int

    def __init__(self, reason: RejectReason, word: str, player: int, now_ms: int):
        super().__init__(EventType.WORD_REJECTED)
        self.reason = reason
        self.word = word
        self.player = player
        self.now_ms = now_ms


# ============================================================================
# TIMER / TURN EVENTS
# ============================================================================

@dataclass
class TickEvent(GameEvent):
    """The active countdown moved; `player` is -1 for the single-player clock."""
    remaining: int
    player: int
    now_ms: int

    def __init__(self, remaining: int, player: int, now_ms: int):
        super().__init__(EventType.TICK)
        self.remaining = remaining
        self.player = player
        self.now_ms = now_ms


@dataclass
class TurnChangedEvent(GameEvent):
    """A new player's turn has started."""
    player_index: int
    now_ms: int

    def __init__(self, player_index: int, now_ms: int):
        super().__init__(EventType.TURN_CHANGED)
        self.player_index = player_index
        self.now_ms = now_ms


# ============================================================================
# SESSION EVENTS
# ============================================================================

@dataclass
class ScoreboardReadyEvent(GameEvent):
    """Players ranked by cumulative score after a multiplayer round."""
    ranked_players: list[Any]  # list[player.Player]
    round_number: int
    has_next_round: bool
    now_ms: int

    def __init__(self, ranked_players: list[Any], round_number: int, has_next_round: bool, now_ms: int):
        super().__init__(EventType.SCOREBOARD_READY)
        self.ranked_players = ranked_players
        self.round_number = round_number
        self.has_next_round = has_next_round
        self.now_ms = now_ms


@dataclass
class SessionEndedEvent(GameEvent):
    """The session is over; `winner` is the top player, or None with no players."""
    winner: Optional[Any]  # player.Player
    now_ms: int

    def __init__(self, winner: Optional[Any], now_ms: int):
        super().__init__(EventType.SESSION_ENDED)
        self.winner = winner
        self.now_ms = now_ms
