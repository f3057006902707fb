"""Fetches the raw word list from local files or remote URLs, trying each source in order."""
import asyncio
import logging
from typing import Callable, Optional, Sequence

import requests

from wordrush.config import game_config
from wordrush.core.dictionary import Lexicon, load_lexicon

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


class DictionaryProvider:
    def __init__(self,
                 sources: Sequence[str],
                 timeout_s: float = game_config.DICTIONARY_TIMEOUT_S,
                 open: Callable = open,
                 http_get: Callable = requests.get) -> None:
        self.sources = list(sources)
        self.timeout_s = timeout_s
        self._open = open
        self._http_get = http_get
        self.failed_sources: list[str] = []

    async def fetch(self) -> Optional[str]:
        """Return the text of the first source that loads, or None if all fail."""
        self.failed_sources = []
        for source in self.sources:
            try:
                if _is_url(source):
                    text = await asyncio.to_thread(self._fetch_url, source)
                else:
                    text = await asyncio.to_thread(self._read_file, source)
            except (OSError, UnicodeDecodeError, requests.RequestException) as e:
                logger.warning(f"fetch: {source} failed: {e}")
                self.failed_sources.append(source)
                continue
            logger.info(f"fetch: loaded dictionary from {source}")
            return text
        logger.error(f"fetch: all {len(self.sources)} dictionary sources failed")
        return None

    async def load(self) -> Lexicon:
        return load_lexicon(await self.fetch())

    def _read_file(self, path: str) -> str:
        with self._open(path, "r", encoding="utf-8") as f:
            return f.read()

    def _fetch_url(self, url: str) -> str:
        response = self._http_get(url, timeout=self.timeout_s)
        response.raise_for_status()
        response.encoding = "utf-8"
        return response.text


def default_sources() -> list[str]:
    return [game_config.DICTIONARY_PATH] + list(game_config.DICTIONARY_URLS)
