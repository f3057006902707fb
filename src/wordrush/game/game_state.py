"""Round and turn state machine for single-player and multiplayer play.

Phases run IDLE -> LETTER_GENERATION -> SOLVING -> AWAITING_INPUT -> ROUND_END,
then SCOREBOARD and the next round (multiplayer) or SESSION_END.

Exactly one Countdown is live at a time. _start_timer() always cancels the
previous one first, and every transition out of AWAITING_INPUT happens
synchronously before the first await, so a timer expiry and a submission can
never both end the same turn or round.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Awaitable, Callable, Optional

from wordrush.config.game_params import GameParams
from wordrush.core import alphabet
from wordrush.core.dictionary import Lexicon
from wordrush.core.scorecard import Play
from wordrush.core.solver import solve
from wordrush.core.tile_generator import LetterGenerator
from wordrush.events.game_events import (
    LettersReadyEvent,
    RejectReason,
    RoundEndedEvent,
    ScoreboardReadyEvent,
    SessionEndedEvent,
    TickEvent,
    TurnChangedEvent,
    WordAcceptedEvent,
    WordRejectedEvent,
)
from wordrush.game.countdown import Countdown
from wordrush.game.player import Player, rank_players, winner_of
from wordrush.game.round import Round
from wordrush.game.time_provider import TimeProvider
from wordrush.game_logging.game_loggers import OutputLogger

logger = logging.getLogger(__name__)

SINGLE_PLAYER = -1


class GamePhase(Enum):
    IDLE = "idle"
    SETUP = "setup"
    LETTER_GENERATION = "letter_generation"
    SOLVING = "solving"
    AWAITING_INPUT = "awaiting_input"
    ROUND_END = "round_end"
    SCOREBOARD = "scoreboard"
    SESSION_END = "session_end"


class SubmitOutcome(str, Enum):
    ACCEPTED = "accepted"
    WRONG = "wrong"
    DUPLICATE = "duplicate"
    EMPTY = "empty"  # Blank input, ignored
    INACTIVE = "inactive"  # Nothing is accepting input right now


@dataclass
class Session:
    mode: str
    players: list[Player]
    total_rounds: int
    turns_per_round: int
    current_round: int = 0
    seed: Optional[int] = None
    rounds: list[Round] = field(default_factory=list)

    def rounds_remaining(self) -> int:
        return self.total_rounds - self.current_round


class Game:
    """Shared round lifecycle; subclasses supply the timer and turn rules."""

    def __init__(self,
                 session: Session,
                 params: GameParams,
                 lexicon: Lexicon,
                 generator: LetterGenerator,
                 events,
                 time_provider: TimeProvider,
                 output_logger: Optional[OutputLogger] = None) -> None:
        self.session = session
        self.params = params
        self.phase = GamePhase.IDLE
        self.round: Optional[Round] = None
        self.countdown: Optional[Countdown] = None
        self._lexicon = lexicon
        self._generator = generator
        self._events = events
        self._time = time_provider
        self.output_logger = output_logger or OutputLogger(None)

    def now_ms(self) -> int:
        return self._time.get_ticks()

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    async def start_round(self) -> Round:
        self._cancel_timer()
        self.session.current_round += 1
        self.phase = GamePhase.LETTER_GENERATION
        bag = self._generator.generate()

        self.phase = GamePhase.SOLVING
        solution = solve(bag, self._lexicon)
        self.round = Round(self.session.current_round, bag, solution)
        self.session.rounds.append(self.round)
        logger.info(f"start_round: round {self.round.number}/{self.session.total_rounds} "
                    f"letters {bag.letters()} words {len(solution)} longest {solution.max_length}")

        self._begin_play()
        self.phase = GamePhase.AWAITING_INPUT
        self._events.trigger(LettersReadyEvent(bag, self.round.number, self.now_ms()))
        self._start_play()
        return self.round

    async def end_round(self) -> None:
        if self.phase is not GamePhase.AWAITING_INPUT:
            return
        self.phase = GamePhase.ROUND_END
        self._cancel_timer()
        self.round.freeze()
        summary = self.round.summary()
        logger.info(f"end_round: round {self.round.number} found "
                    f"{summary.found_count}/{summary.total_count}")
        self.output_logger.log_round_end(self.round.number, summary.found_count,
                                         summary.total_count, self.now_ms())
        self._events.trigger(RoundEndedEvent(summary, self.now_ms()))
        await self._after_round_end()

    async def stop(self) -> None:
        """Abandon the session: cancel the live timer and go idle."""
        self._cancel_timer()
        if self.round is not None:
            self.round.freeze()
        self.phase = GamePhase.IDLE

    def _end_session(self) -> None:
        self.phase = GamePhase.SESSION_END
        winner = winner_of(self.session.players)
        logger.info(f"_end_session: winner {winner}")
        self._events.trigger(SessionEndedEvent(winner, self.now_ms()))

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    async def submit_word(self, raw: str) -> SubmitOutcome:
        raise NotImplementedError

    def _referee(self, raw: str, player_index: int) -> SubmitOutcome:
        """Judge and score one submission against the current round."""
        word = alphabet.normalize_word(raw)
        if not word:
            return SubmitOutcome.EMPTY
        score_card = self.round.score_card
        play = score_card.judge(word)
        if play is Play.BAD_WORD:
            self._events.trigger(WordRejectedEvent(RejectReason.WRONG, word, player_index, self.now_ms()))
            return SubmitOutcome.WRONG
        if play is Play.DUPE_WORD:
            self._events.trigger(WordRejectedEvent(RejectReason.DUPLICATE, word, player_index, self.now_ms()))
            return SubmitOutcome.DUPLICATE

        points, is_bonus = score_card.accept(word)
        player = self.session.players[max(player_index, 0)]
        player.score += points
        logger.info(f"_referee: {player.name} found {word} for {points}{' (bonus)' if is_bonus else ''}")
        self.output_logger.log_word_formed(word, player_index, points, self.now_ms())
        self._events.trigger(WordAcceptedEvent(word, points, is_bonus, player_index, self.now_ms()))
        return SubmitOutcome.ACCEPTED

    # ------------------------------------------------------------------
    # Timer slot
    # ------------------------------------------------------------------

    def _start_timer(self,
                     duration: int,
                     on_tick: Callable[[int], Awaitable[None]],
                     on_expire: Callable[[], Awaitable[None]],
                     name: str,
                     start_delay_s: float = 0.0) -> Countdown:
        self._cancel_timer()
        self.countdown = Countdown(duration, on_tick, on_expire,
                                   interval_s=self.params.tick_interval_s,
                                   time_provider=self._time,
                                   name=name,
                                   start_delay_s=start_delay_s)
        self.countdown.start()
        return self.countdown

    def _cancel_timer(self) -> None:
        if self.countdown is not None:
            self.countdown.cancel()

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def _begin_play(self) -> None:
        pass

    def _start_play(self) -> None:
        raise NotImplementedError

    async def _after_round_end(self) -> None:
        raise NotImplementedError


class SinglePlayerGame(Game):
    """One round against one continuous clock; the round end is the session end."""

    @property
    def score(self) -> int:
        return self.session.players[0].score

    def _start_play(self) -> None:
        self._start_timer(self.params.single_player_time, self._on_tick, self.end_round, name="single_player_timer")

    async def _on_tick(self, remaining: int) -> None:
        self._events.trigger(TickEvent(remaining, SINGLE_PLAYER, self.now_ms()))

    async def submit_word(self, raw: str) -> SubmitOutcome:
        if self.phase is not GamePhase.AWAITING_INPUT:
            return SubmitOutcome.INACTIVE
        return self._referee(raw, SINGLE_PLAYER)

    async def _after_round_end(self) -> None:
        self._end_session()


class MultiplayerGame(Game):
    """Players take timed turns; each turn allows one submission."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.current_player = 0
        self.turns_consumed = 0
        self._turn_seq = 0
        self._turn_open = False

    @property
    def active_player(self) -> Player:
        return self.session.players[self.current_player]

    def is_round_complete(self) -> bool:
        return all(p.turns_played >= self.session.turns_per_round for p in self.session.players)

    def _begin_play(self) -> None:
        for player in self.session.players:
            player.turns_played = 0
        self.current_player = 0
        self.turns_consumed = 0

    def _start_play(self) -> None:
        self._start_turn()

    def _start_turn(self, start_delay_s: float = 0.0) -> None:
        self._turn_seq += 1
        seq = self._turn_seq
        self._turn_open = True
        player = self.active_player
        logger.info(f"_start_turn: {player.name} "
                    f"({player.turns_played + 1}/{self.session.turns_per_round})")

        async def on_expire() -> None:
            await self._expire_turn(seq)

        self._start_timer(self.params.turn_time, self._on_tick, on_expire,
                          name=f"turn_timer_{seq}", start_delay_s=start_delay_s)
        self._events.trigger(TurnChangedEvent(self.current_player, self.now_ms()))

    async def _on_tick(self, remaining: int) -> None:
        self._events.trigger(TickEvent(remaining, self.current_player, self.now_ms()))

    def input_changed(self, buffer: str) -> None:
        """The active player's input changed; the first non-empty buffer freezes the turn clock."""
        if self.phase is not GamePhase.AWAITING_INPUT or not self._turn_open:
            return
        if buffer and self.countdown is not None:
            self.countdown.pause()

    async def submit_word(self, raw: str) -> SubmitOutcome:
        if self.phase is not GamePhase.AWAITING_INPUT or not self._turn_open:
            return SubmitOutcome.INACTIVE
        outcome = self._referee(raw, self.current_player)
        if outcome is SubmitOutcome.EMPTY:
            return outcome
        await self._consume_turn()
        return outcome

    async def _expire_turn(self, seq: int) -> None:
        if seq != self._turn_seq:
            return
        logger.info(f"_expire_turn: {self.active_player.name} ran out of time")
        await self._consume_turn()

    async def _consume_turn(self) -> None:
        if not self._turn_open:
            return
        self._turn_open = False
        self._cancel_timer()
        self.active_player.turns_played += 1
        self.turns_consumed += 1

        if self.is_round_complete():
            await self.end_round()
            return
        self.current_player = (self.current_player + 1) % len(self.session.players)
        self._start_turn(start_delay_s=self.params.turn_switch_delay_s)

    async def _after_round_end(self) -> None:
        # The presenter shows the solution first; the scoreboard comes on request
        pass

    def show_scoreboard(self) -> list[Player]:
        if self.phase is not GamePhase.ROUND_END:
            return rank_players(self.session.players)
        self.phase = GamePhase.SCOREBOARD
        ranked = rank_players(self.session.players)
        self._events.trigger(ScoreboardReadyEvent(
            ranked, self.session.current_round, self.session.rounds_remaining() > 0, self.now_ms()))
        return ranked

    async def continue_session(self) -> None:
        """Move on from a finished round: next round, or the final result."""
        if self.phase not in (GamePhase.ROUND_END, GamePhase.SCOREBOARD):
            return
        if self.phase is GamePhase.ROUND_END:
            self.show_scoreboard()
        if self.session.rounds_remaining() > 0:
            await self.start_round()
        else:
            self._end_session()
