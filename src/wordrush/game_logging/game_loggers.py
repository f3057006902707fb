"""JSONL loggers for game results and session replay."""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class BaseLogger:
    """Base class for all JSONL-based loggers. A logger without a file writes nothing."""
    def __init__(self, log_file: Optional[str]):
        self.log_file = log_file
        self.log_f = None

    def start_logging(self):
        """Open the log file for writing."""
        if self.log_file:
            logger.info(f"start_logging: {self.log_file}")
            directory = os.path.dirname(self.log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            self.log_f = open(self.log_file, "w", encoding="utf-8")

    def stop_logging(self):
        """Close the log file."""
        if self.log_f:
            self.log_f.close()
            self.log_f = None

    def _write_event(self, event: dict):
        """Write a dictionary as a JSON line to the log file."""
        if not self.log_f:
            return
        self.log_f.write(json.dumps(event, ensure_ascii=False) + "\n")
        self.log_f.flush()


class OutputLogger(BaseLogger):
    """Logs game-level events like accepted words and round results."""
    def log_word_formed(self, word: str, player: int, score: int, now_ms: int):
        event = {
            "time": now_ms,
            "event_type": "word_formed",
            "word": word,
            "player": player,
            "score": score
        }
        self._write_event(event)

    def log_round_end(self, round_number: int, found: int, total: int, now_ms: int):
        event = {
            "time": now_ms,
            "event_type": "round_end",
            "round": round_number,
            "found": found,
            "total": total,
        }
        self._write_event(event)


class GameLogger(BaseLogger):
    """Logs session-level settings for replaying or debugging."""
    def log_seed(self, seed: int):
        event = {
            "event_type": "seed",
            "seed": seed
        }
        self._write_event(event)

    def log_params(self, params: str):
        self._write_event({"event_type": "params", "params": params})

    def log_events(self, now_ms: int, events: dict):
        log_entry = {
            "timestamp_ms": now_ms,
            "events": events
        }

        self._write_event(log_entry)
