"""
Startup configuration.

The only external setting is the proxy base URL, read from the environment
(HANZIDLE_PROXY_URL). Without it every remote feature is off and the game
runs purely on the bundled tables. CLI flags override these values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from hanzidle.datasets.repository import DATA_DIR, VocabularyRepository
from hanzidle.dictionary import DictionaryService
from hanzidle.harness.session import MAX_GUESSES
from hanzidle.remote import ProxyClient
from hanzidle.remote.client import HINTS_TIMEOUT, PINYIN_TIMEOUT, RANDOM_WORD_TIMEOUT

ENV_PROXY_URL = "HANZIDLE_PROXY_URL"


@dataclass(frozen=True)
class Settings:
    proxy_url: Optional[str] = None
    pinyin_timeout: float = PINYIN_TIMEOUT
    random_word_timeout: float = RANDOM_WORD_TIMEOUT
    hints_timeout: float = HINTS_TIMEOUT
    max_guesses: int = MAX_GUESSES
    data_dir: Path = DATA_DIR

    def __post_init__(self):
        url = (self.proxy_url or "").strip().rstrip("/")
        object.__setattr__(self, "proxy_url", url or None)
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {self.max_guesses}")

    @property
    def has_proxy(self) -> bool:
        return self.proxy_url is not None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> Settings:
        """Settings from the environment; overrides set to None are ignored."""
        env = os.environ if environ is None else environ
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(cls(proxy_url=env.get(ENV_PROXY_URL)), **given)


def build_service(settings: Settings, *, seed: int | None = None) -> DictionaryService:
    """Wire repository + optional proxy client into one service object."""
    repo = VocabularyRepository.from_dir(settings.data_dir)
    client = None
    if settings.has_proxy:
        client = ProxyClient(
            settings.proxy_url,
            pinyin_timeout=settings.pinyin_timeout,
            random_word_timeout=settings.random_word_timeout,
            hints_timeout=settings.hints_timeout,
        )
    return DictionaryService(repo, client=client, seed=seed)
