"""Presenter interface: the receiving end of the game events.

A presenter overrides the coroutines it cares about; the rest do nothing.
Handler signatures mirror the fields of the matching event in game_events.
"""
from typing import Any, Optional

from wordrush.events.game_events import EventType, RejectReason
from wordrush.utils.pygameasync import EventEngine


class Presenter:
    async def letters_ready(self, bag: Any, round_number: int, now_ms: int) -> None:
        pass

    async def word_accepted(self, word: str, points: int, is_bonus: bool, player: int, now_ms: int) -> None:
        pass

    async def word_rejected(self, reason: RejectReason, word: str, player: int, now_ms: int) -> None:
        pass

    async def tick(self, remaining: int, player: int, now_ms: int) -> None:
        pass

    async def turn_changed(self, player_index: int, now_ms: int) -> None:
        pass

    async def round_ended(self, summary: Any, now_ms: int) -> None:
        pass

    async def scoreboard_ready(self, ranked_players: list, round_number: int,
                               has_next_round: bool, now_ms: int) -> None:
        pass

    async def session_ended(self, winner: Optional[Any], now_ms: int) -> None:
        pass


def attach_presenter(engine: EventEngine, presenter: Presenter) -> None:
    engine.on(EventType.LETTERS_READY.value)(presenter.letters_ready)
    engine.on(EventType.WORD_ACCEPTED.value)(presenter.word_accepted)
    engine.on(EventType.WORD_REJECTED.value)(presenter.word_rejected)
    engine.on(EventType.TICK.value)(presenter.tick)
    engine.on(EventType.TURN_CHANGED.value)(presenter.turn_changed)
    engine.on(EventType.ROUND_ENDED.value)(presenter.round_ended)
    engine.on(EventType.SCOREBOARD_READY.value)(presenter.scoreboard_ready)
    engine.on(EventType.SESSION_ENDED.value)(presenter.session_ended)
