"""Word definition lookup against the TDK dictionary service.

The service does not allow cross-origin calls, so it is reached through a
list of public proxies tried in order, each with a short timeout. Lookups are
advisory: nothing here touches game state.
"""
import asyncio
from dataclasses import dataclass, field
from enum import Enum
import json
import logging
from typing import Any, Callable, Optional, Sequence
from urllib.parse import quote

import requests

from wordrush.config import game_config

logger = logging.getLogger(__name__)


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"


@dataclass
class Sense:
    meaning: str
    examples: list[str] = field(default_factory=list)


@dataclass
class DefinitionResult:
    word: str
    status: LookupStatus
    senses: list[Sense] = field(default_factory=list)
    source_url: str = ""

    def format(self) -> str:
        if self.status is LookupStatus.UNREACHABLE:
            return f"TDK'ya bağlanılamıyor. {self.source_url}"
        if self.status is LookupStatus.NOT_FOUND:
            return f"'{self.word}' için anlam bulunamadı."
        lines = []
        for index, sense in enumerate(self.senses, start=1):
            lines.append(f"{index}. {sense.meaning}")
            lines.extend(f'   "{example}"' for example in sense.examples)
        return "\n".join(lines)


class _NotFound(Exception):
    pass


def parse_tdk_payload(data: Any) -> list[Sense]:
    """Extract senses from a TDK `gts` response.

    Raises:
        _NotFound: the payload is a valid "no result" answer
        ValueError: the payload is not a TDK response at all
    """
    if isinstance(data, dict) and "contents" in data:
        # allorigins wraps the upstream body as a string
        data = json.loads(data["contents"])
    if isinstance(data, dict) and "error" in data:
        raise _NotFound(data["error"])
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ValueError("unexpected TDK payload")
    senses = []
    for entry in data[0].get("anlamlarListe") or []:
        if not isinstance(entry, dict):
            raise ValueError("unexpected TDK sense entry")
        examples = [ex["ornek"] for ex in entry.get("orneklerListe") or []
                    if isinstance(ex, dict) and ex.get("ornek")]
        senses.append(Sense(entry.get("anlam", ""), examples))
    if not senses:
        raise _NotFound("no senses")
    return senses


class DefinitionLookup:
    def __init__(self,
                 proxies: Sequence[str] = tuple(game_config.DEFINITION_PROXIES),
                 timeout_s: float = game_config.DEFINITION_TIMEOUT_S,
                 http_get: Callable = requests.get) -> None:
        self.proxies = list(proxies)
        self.timeout_s = timeout_s
        self._http_get = http_get

    @staticmethod
    def tdk_url(word: str) -> str:
        return game_config.TDK_URL.format(word=quote(word))

    def proxy_urls(self, word: str) -> list[str]:
        target = quote(self.tdk_url(word), safe="")
        return [proxy.format(url=target) for proxy in self.proxies]

    async def lookup(self, word: str) -> DefinitionResult:
        saw_not_found = False
        for url in self.proxy_urls(word):
            try:
                data = await asyncio.to_thread(self._get_json, url)
                senses = parse_tdk_payload(data)
            except _NotFound as e:
                logger.info(f"lookup: {word} not found via {url}: {e}")
                saw_not_found = True
                continue
            except (requests.RequestException, ValueError, KeyError, TypeError) as e:
                logger.warning(f"lookup: {url} failed: {e}")
                continue
            return DefinitionResult(word, LookupStatus.FOUND, senses, self.tdk_url(word))
        status = LookupStatus.NOT_FOUND if saw_not_found else LookupStatus.UNREACHABLE
        return DefinitionResult(word, status, [], self.tdk_url(word))

    def _get_json(self, url: str) -> Optional[Any]:
        response = self._http_get(url, headers={"Accept": "application/json"}, timeout=self.timeout_s)
        response.raise_for_status()
        return response.json()
