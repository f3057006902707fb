import pytest

from wordrush.core.tile_generator import LetterBag
from wordrush.game.player import Player
from wordrush.game.round import RoundSummary, WordResult
from wordrush.main import ConsolePresenter, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode == "single"
    assert args.rounds == 3
    assert args.turns == 5
    assert args.sampling == "limited_repeat"
    assert args.dictionary is None


def test_parse_args_multiplayer():
    args = parse_args(["--mode", "multiplayer", "--players", "Ali", "Ayşe", "--rounds", "5",
                       "--dictionary", "a.txt", "--dictionary", "https://example.test/words.txt"])
    assert args.players == ["Ali", "Ayşe"]
    assert args.rounds == 5
    assert args.dictionary == ["a.txt", "https://example.test/words.txt"]


def test_parse_args_rejects_round_count():
    with pytest.raises(SystemExit):
        parse_args(["--rounds", "9"])


@pytest.mark.asyncio
async def test_console_presenter_output(capsys):
    presenter = ConsolePresenter(["Ali", "Ayşe"])
    await presenter.letters_ready(LetterBag(tuple("aeiunrltks")), 1, 0)
    await presenter.word_accepted("kurtlane", 160, True, 1, 0)
    summary = RoundSummary(1, "aeiunrltks", {4: [WordResult("kale", True)]}, 1, 2)
    await presenter.round_ended(summary, 0)
    await presenter.scoreboard_ready([Player("Ayşe", 160), Player("Ali", 0)], 1, True, 0)
    await presenter.session_ended(Player("Ayşe", 160), 0)

    out = capsys.readouterr().out
    assert "1. EL" in out
    assert "+160 kurtlane (Ayşe)  BONUS!" in out
    assert "4 HARF: kale*" in out
    assert "1. Ayşe  160" in out
    assert "AYŞE - 160 puan" in out


@pytest.mark.asyncio
async def test_exit_prompt_only_when_input_loop_waits(capsys):
    await ConsolePresenter(["Ali", "Ayşe"]).session_ended(Player("Ali", 40), 0)
    multiplayer_out = capsys.readouterr().out
    assert "Oyun bitti." in multiplayer_out
    assert "Enter" not in multiplayer_out

    await ConsolePresenter([], wait_for_exit=True).session_ended(Player("Oyuncu", 40), 0)
    assert "Enter ile çıkın." in capsys.readouterr().out
