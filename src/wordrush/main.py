#!/usr/bin/env python3
"""Console front-end: plays a session in the terminal, one word per line."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Optional

import pygame

from wordrush.config import game_config
from wordrush.config.game_params import GameParams, SAMPLING_POLICIES
from wordrush.core.definitions import DefinitionLookup
from wordrush.core.dictionary_provider import DictionaryProvider, default_sources
from wordrush.events.game_events import RejectReason
from wordrush.events.presenter import Presenter, attach_presenter
from wordrush.game.game_coordinator import GameCoordinator, validate_player_names
from wordrush.game.game_state import GamePhase
from wordrush.game_logging.game_loggers import GameLogger, OutputLogger
from wordrush.utils.pygameasync import EventEngine

logger = logging.getLogger(__name__)


class ConsolePresenter(Presenter):
    def __init__(self, player_names: list[str], wait_for_exit: bool = False) -> None:
        self.player_names = player_names
        self.wait_for_exit = wait_for_exit

    def _name(self, player: int) -> str:
        if 0 <= player < len(self.player_names):
            return self.player_names[player]
        return "Sen"

    async def letters_ready(self, bag: Any, round_number: int, now_ms: int) -> None:
        print(f"\n=== {round_number}. EL ===")
        print("  ".join(bag.display()))

    async def word_accepted(self, word: str, points: int, is_bonus: bool, player: int, now_ms: int) -> None:
        bonus = "  BONUS! En uzun kelime, 2x puan!" if is_bonus else ""
        print(f"+{points} {word} ({self._name(player)}){bonus}")

    async def word_rejected(self, reason: RejectReason, word: str, player: int, now_ms: int) -> None:
        if reason is RejectReason.DUPLICATE:
            print(f"'{word}' zaten bulundu")
        else:
            print(f"'{word}' geçersiz")

    async def tick(self, remaining: int, player: int, now_ms: int) -> None:
        warning = game_config.TIMER_WARNING_SINGLE if player < 0 else game_config.TIMER_WARNING_TURN
        if remaining <= warning:
            print(f"[{remaining}]")

    async def turn_changed(self, player_index: int, now_ms: int) -> None:
        print(f"Sıra: {self._name(player_index)}")

    async def round_ended(self, summary: Any, now_ms: int) -> None:
        print(f"\n--- {summary.round_number}. el bitti: {summary.found_count}/{summary.total_count} "
              f"(%{summary.success_percentage}) ---")
        for length, results in summary.groups.items():
            words = ", ".join(r.word + ("*" if r.found else "") for r in results)
            print(f"{length} HARF: {words}")

    async def scoreboard_ready(self, ranked_players: list, round_number: int,
                               has_next_round: bool, now_ms: int) -> None:
        print(f"\n{round_number}. EL TAMAMLANDI!")
        for place, player in enumerate(ranked_players, start=1):
            print(f"{place}. {player.name}  {player.score}")

    async def session_ended(self, winner: Optional[Any], now_ms: int) -> None:
        if winner is not None:
            print(f"\n{winner.name.upper()} - {winner.score} puan")
        if self.wait_for_exit:
            # the input loop is still blocked on stdin when the clock ends the game
            print("Oyun bitti. Enter ile çıkın.")
        else:
            print("Oyun bitti.")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Word rush: find words in ten letters")
    parser.add_argument("--mode", choices=["single", "multiplayer"], default="single")
    parser.add_argument("--players", nargs="*", default=[], help="Multiplayer player names")
    parser.add_argument("--rounds", type=int, choices=game_config.ROUND_CHOICES,
                        default=game_config.DEFAULT_ROUNDS)
    parser.add_argument("--turns", type=int, default=game_config.DEFAULT_TURNS_PER_ROUND)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sampling", choices=SAMPLING_POLICIES, default="limited_repeat")
    parser.add_argument("--tick-interval", type=float, default=game_config.TICK_INTERVAL_S)
    parser.add_argument("--dictionary", action="append", default=None,
                        help="Dictionary file or URL; repeat for fallbacks")
    parser.add_argument("--log-dir", default=game_config.LOG_DIR, help="Write JSONL game logs here")
    parser.add_argument("--define", default=None, help="Look up a word definition and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


async def read_line() -> str:
    return await asyncio.to_thread(sys.stdin.readline)


async def define(word: str) -> int:
    result = await DefinitionLookup().lookup(word)
    print(result.format())
    return 0


async def play(args: argparse.Namespace) -> int:
    provider = DictionaryProvider(args.dictionary or default_sources())
    lexicon = await provider.load()
    if lexicon.used_fallback:
        print("Sözlük yüklenemedi, yedek kelime listesi kullanılıyor.")

    game_logger = GameLogger(os.path.join(args.log_dir, "game.jsonl") if args.log_dir else None)
    output_logger = OutputLogger(os.path.join(args.log_dir, "output.jsonl") if args.log_dir else None)
    game_logger.start_logging()
    output_logger.start_logging()

    player_names = validate_player_names(args.players) or []
    events = EventEngine()
    attach_presenter(events, ConsolePresenter(player_names, wait_for_exit=args.mode != "multiplayer"))
    await events.start()
    coordinator = GameCoordinator(lexicon, events, game_logger=game_logger, output_logger=output_logger)
    params = GameParams.from_args(args)

    try:
        if args.mode == "multiplayer":
            if not await coordinator.start_multiplayer(player_names, params):
                print(f"En az {game_config.MIN_PLAYERS} farklı oyuncu gerekli!")
                return 1
        else:
            await coordinator.start_single_player(params)

        while coordinator.phase is not GamePhase.SESSION_END:
            line = (await read_line()).rstrip("\n")
            if coordinator.phase is GamePhase.AWAITING_INPUT:
                coordinator.input_changed(line)
                await coordinator.submit_word(line)
            elif coordinator.phase in (GamePhase.ROUND_END, GamePhase.SCOREBOARD):
                await coordinator.continue_session()
            await events.drain()
        return 0
    finally:
        await coordinator.return_to_main_menu()
        await events.stop()
        game_logger.stop_logging()
        output_logger.stop_logging()


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.define:
        return asyncio.run(define(args.define))
    pygame.init()
    try:
        return asyncio.run(play(args))
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
