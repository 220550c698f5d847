"""
HTTP client for the remote language-model proxy.

Endpoints (all POST, JSON in and out):
  - /pinyin       {characters}          -> {choices: [{message: {content}}]}
  - /random-word  {length, exclude}     -> {word}
  - /hints        {characters, isIdiom} -> {hints: [...]}

Every call makes a single attempt and returns a RemoteResult; nothing here
raises for network trouble, timeouts, non-200 statuses or odd payloads.
The blocking `requests` call runs on the client's own thread pool and is also
bounded by asyncio.wait_for. A call that times out is abandoned in its
worker thread; the pool is not the loop's default executor, so neither the
awaiting caller nor asyncio.run's shutdown waits for it.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List

import requests

from hanzidle.pinyin import extract_cjk, parse_syllables
from .results import HTTP_STATUS, MALFORMED, NETWORK, TIMEOUT, RemoteResult

logger = logging.getLogger(__name__)

PINYIN_TIMEOUT = 10.0
RANDOM_WORD_TIMEOUT = 10.0
HINTS_TIMEOUT = 20.0
# Upper bound for establishing the TCP connection; the endpoint timeout
# bounds each read.
CONNECT_TIMEOUT = 5.0
# Worker threads for blocking requests (abandoned calls may hold one each).
MAX_WORKERS = 8

# Number of hints the UI reveals.
HINT_COUNT = 3


class ProxyClient:
    """Thin async wrapper around the three proxy endpoints."""

    def __init__(
            self,
            base_url: str,
            *,
            pinyin_timeout: float = PINYIN_TIMEOUT,
            random_word_timeout: float = RANDOM_WORD_TIMEOUT,
            hints_timeout: float = HINTS_TIMEOUT,
    ):
        if not base_url:
            raise ValueError("base_url must be a non-empty URL")
        self.base_url = base_url.rstrip("/")
        self.pinyin_timeout = float(pinyin_timeout)
        self.random_word_timeout = float(random_word_timeout)
        self.hints_timeout = float(hints_timeout)
        self._executor = ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix="hanzidle-proxy")

    def close(self) -> None:
        """Stop accepting new calls; requests already in flight are left to finish."""
        self._executor.shutdown(wait=False)

    # ---------- transport ----------

    def post_json(self, path: str, payload: Dict[str, Any], timeout: float) -> RemoteResult:
        """Blocking POST; returns the decoded JSON body or a failure."""
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(url, json=payload, timeout=(min(CONNECT_TIMEOUT, timeout), timeout))
        except requests.Timeout as e:
            return RemoteResult.failure(TIMEOUT, f"{url}: {e}")
        except requests.RequestException as e:
            return RemoteResult.failure(NETWORK, f"{url}: {e}")

        if resp.status_code != 200:
            return RemoteResult.failure(HTTP_STATUS, f"{url}: status {resp.status_code}")
        try:
            return RemoteResult.ok(resp.json())
        except ValueError as e:
            return RemoteResult.failure(MALFORMED, f"{url}: invalid JSON ({e})")

    async def apost_json(self, path: str, payload: Dict[str, Any], timeout: float) -> RemoteResult:
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self._executor, self.post_json, path, payload, timeout),
                timeout=timeout)
        except asyncio.TimeoutError:
            return RemoteResult.failure(TIMEOUT, f"{path}: no answer within {timeout}s")

    # ---------- endpoints ----------

    async def fetch_pinyin(self, characters: str) -> RemoteResult:
        """
        Ask the proxy for one syllable per character.

        Success data is the list of validated uppercase tokens; the count is
        NOT checked here (the resolver owns that rule).
        """
        res = await self.apost_json("/pinyin", {"characters": characters}, self.pinyin_timeout)
        return res.flat_map(_parse_pinyin_payload)

    async def fetch_random_word(self, length: int, exclude: List[str]) -> RemoteResult:
        """Success data is the CJK-only text of the returned word (may be any length)."""
        res = await self.apost_json(
            "/random-word", {"length": length, "exclude": list(exclude)},
            self.random_word_timeout)
        return res.flat_map(_parse_word_payload)

    async def fetch_hints(self, characters: str, is_idiom: bool = False) -> RemoteResult:
        """Success data is the first HINT_COUNT hints as strings."""
        res = await self.apost_json(
            "/hints", {"characters": characters, "isIdiom": is_idiom}, self.hints_timeout)
        return res.flat_map(_parse_hints_payload)


# ---------- payload parsing ----------

def _parse_pinyin_payload(data: Any) -> RemoteResult:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return RemoteResult.failure(MALFORMED, "missing choices[0].message.content")
    if not isinstance(content, str):
        return RemoteResult.failure(MALFORMED, "content is not text")
    logger.debug("proxy pinyin content: %r", content)
    return RemoteResult.ok(parse_syllables(content))


def _parse_word_payload(data: Any) -> RemoteResult:
    word = data.get("word") if isinstance(data, dict) else None
    if not isinstance(word, str):
        return RemoteResult.failure(MALFORMED, "missing word")
    return RemoteResult.ok(extract_cjk(word))


def _parse_hints_payload(data: Any) -> RemoteResult:
    hints = data.get("hints") if isinstance(data, dict) else None
    if not isinstance(hints, list) or len(hints) < HINT_COUNT:
        return RemoteResult.failure(MALFORMED, f"expected at least {HINT_COUNT} hints")
    return RemoteResult.ok([str(h) for h in hints[:HINT_COUNT]])
