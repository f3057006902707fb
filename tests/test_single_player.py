"""Single-player timed round: submissions, scoring, and the 100-tick clock."""
import pytest

from wordrush.events.game_events import (
    LettersReadyEvent, RejectReason, RoundEndedEvent, SessionEndedEvent, TickEvent,
    WordAcceptedEvent, WordRejectedEvent,
)
from wordrush.game.game_state import GamePhase, SINGLE_PLAYER, SubmitOutcome
from tests.fixtures.dictionary_helpers import SCENARIO_BAG
from tests.fixtures.game_factory import create_single_player_game, expire


@pytest.mark.asyncio
async def test_start_round_solves_before_play():
    game, recorder = create_single_player_game()
    await game.start_round()

    assert game.phase is GamePhase.AWAITING_INPUT
    assert game.round.bag == SCENARIO_BAG
    assert game.round.solution.max_length == 8
    assert game.countdown.remaining == 100
    ready = recorder.of_type(LettersReadyEvent)
    assert len(ready) == 1
    assert ready[0].bag == SCENARIO_BAG
    assert ready[0].round_number == 1
    await game.stop()


@pytest.mark.asyncio
async def test_correct_word_scores():
    game, recorder = create_single_player_game()
    await game.start_round()

    assert await game.submit_word("  KALE ") is SubmitOutcome.ACCEPTED
    assert game.score == 40
    assert game.round.found_words == ["kale"]
    accepted = recorder.of_type(WordAcceptedEvent)
    assert [(e.word, e.points, e.is_bonus, e.player) for e in accepted] == [("kale", 40, False, SINGLE_PLAYER)]
    await game.stop()


@pytest.mark.asyncio
async def test_wrong_word_rejected_without_state_change():
    game, recorder = create_single_player_game()
    await game.start_round()

    assert await game.submit_word("kitap") is SubmitOutcome.WRONG
    assert game.score == 0
    assert game.round.found_words == []
    assert game.phase is GamePhase.AWAITING_INPUT
    assert recorder.of_type(WordRejectedEvent)[0].reason is RejectReason.WRONG
    await game.stop()


@pytest.mark.asyncio
async def test_duplicate_submission_scores_once():
    game, recorder = create_single_player_game()
    await game.start_round()

    assert await game.submit_word("kurtlane") is SubmitOutcome.ACCEPTED
    assert game.score == 160
    assert game.round.longest_words_found == {"kurtlane"}

    assert await game.submit_word("kurtlane") is SubmitOutcome.DUPLICATE
    assert game.score == 160
    assert game.round.found_words == ["kurtlane"]
    assert len(recorder.of_type(WordAcceptedEvent)) == 1
    assert recorder.of_type(WordRejectedEvent)[0].reason is RejectReason.DUPLICATE
    await game.stop()


@pytest.mark.asyncio
async def test_bonus_law():
    game, recorder = create_single_player_game()
    await game.start_round()

    for word in ["ekin", "kurtlane", "sinek", "turnakel"]:
        await game.submit_word(word)
    points = {e.word: (e.points, e.is_bonus) for e in recorder.of_type(WordAcceptedEvent)}
    assert points == {
        "ekin": (40, False),
        "kurtlane": (160, True),
        "sinek": (50, False),
        "turnakel": (160, True),
    }
    assert game.score == 410
    await game.stop()


@pytest.mark.asyncio
async def test_empty_input_ignored():
    game, recorder = create_single_player_game()
    await game.start_round()

    assert await game.submit_word("   ") is SubmitOutcome.EMPTY
    assert recorder.of_type(WordRejectedEvent) == []
    await game.stop()


@pytest.mark.asyncio
async def test_timer_ends_round_exactly_once():
    game, recorder = create_single_player_game()
    await game.start_round()
    countdown = game.countdown

    for _ in range(99):
        await countdown.tick()
    assert game.phase is GamePhase.AWAITING_INPUT
    assert recorder.of_type(TickEvent)[-1].remaining == 1

    await countdown.tick()
    assert game.phase is GamePhase.SESSION_END
    await countdown.tick()
    await countdown.tick()

    assert len(recorder.of_type(RoundEndedEvent)) == 1
    assert len(recorder.of_type(SessionEndedEvent)) == 1
    assert len(recorder.of_type(TickEvent)) == 100
    assert recorder.of_type(TickEvent)[-1].remaining == 0


@pytest.mark.asyncio
async def test_no_submissions_after_round_end():
    game, recorder = create_single_player_game()
    await game.start_round()
    await expire(game.countdown)

    assert await game.submit_word("kale") is SubmitOutcome.INACTIVE
    assert game.round.frozen
    assert game.round.found_words == []


@pytest.mark.asyncio
async def test_round_end_reveals_solution():
    game, recorder = create_single_player_game()
    await game.start_round()
    await game.submit_word("kale")
    await game.submit_word("kurtlane")
    await expire(game.countdown)

    summary = recorder.of_type(RoundEndedEvent)[0].summary
    assert list(summary.groups) == [4, 5, 8]
    assert [(r.word, r.found) for r in summary.groups[4]] == [("ekin", False), ("kale", True), ("sert", False)]
    assert [(r.word, r.found) for r in summary.groups[8]] == [("kurtlane", True), ("turnakel", False)]
    assert summary.found_count == 2
    assert summary.missed_count == 4
    assert summary.success_percentage == 33

    winner = recorder.of_type(SessionEndedEvent)[0].winner
    assert winner.score == 200


@pytest.mark.asyncio
async def test_degenerate_round_with_no_words():
    game, recorder = create_single_player_game(words=["kitap", "bebek"])
    await game.start_round()

    assert game.round.solution.max_length == 0
    assert await game.submit_word("kitap") is SubmitOutcome.WRONG
    await expire(game.countdown)
    summary = recorder.of_type(RoundEndedEvent)[0].summary
    assert summary.total_count == 0
    assert summary.success_percentage == 0


@pytest.mark.asyncio
async def test_stop_cancels_timer():
    game, recorder = create_single_player_game()
    await game.start_round()
    countdown = game.countdown
    await game.stop()

    assert countdown.cancelled
    assert game.phase is GamePhase.IDLE
    await countdown.tick()
    assert recorder.of_type(TickEvent) == []
