"""
Dictionary service: pinyin resolution, random targets and hints.

Fallback chain for lookup_pinyin(characters):
  1) cache               (no I/O)
  2) remote proxy        (optional; any failure -> next stage)
  3) built-in tables     (VocabularyRepository.built_in_lookup)
A result from (2) or (3) is cached; if both fail the answer is None.

One instance is built at startup (see hanzidle.config.build_service) and
passed to whatever needs it. Its caches are safe to hit from concurrent
lookups; duplicate in-flight requests for the same key just write the same
value twice.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from hanzidle.datasets.repository import VocabularyRepository
from hanzidle.engine.types import Word
from hanzidle.remote import ProxyClient
from .cache import ExclusionSet, LookupCache

logger = logging.getLogger(__name__)

MIN_WORD_LEN = 2
MAX_WORD_LEN = 8
# How many used words are sent as `exclude` to /random-word.
RECENT_EXCLUDE_LIMIT = 20


class DictionaryService:
    def __init__(
            self,
            repository: VocabularyRepository,
            *,
            client: ProxyClient | None = None,
            seed: int | None = None,
    ):
        self.repository = repository
        self.client = client
        self.rng = random.Random(seed)
        self._pinyin_cache: LookupCache[str, List[str]] = LookupCache()
        self._hints_cache: LookupCache[str, List[str]] = LookupCache()
        self._used_words = ExclusionSet()

    @property
    def has_proxy(self) -> bool:
        return self.client is not None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()

    # ---------- polyphonic exposure ----------

    def pinyin_options(self, character: str) -> List[str]:
        return self.repository.pinyin_options(character)

    def is_polyphonic(self, character: str) -> bool:
        return self.repository.is_polyphonic(character)

    # ---------- pinyin resolution ----------

    async def lookup_pinyin(self, characters: str) -> Optional[List[str]]:
        """Return one uppercase syllable per character, or None."""
        cached = self._pinyin_cache.get(characters)
        if cached is not None:
            logger.debug("pinyin cache hit for %r", characters)
            return list(cached)

        result: Optional[List[str]] = None
        if self.client is not None:
            result = await self._lookup_from_proxy(characters)

        if result is None:
            result = self.repository.built_in_lookup(characters)

        if result is None:
            logger.warning("all pinyin lookups failed for %r", characters)
            return None

        self._pinyin_cache.put(characters, result)
        return list(result)

    async def _lookup_from_proxy(self, characters: str) -> Optional[List[str]]:
        logger.debug("proxy pinyin lookup for %r", characters)
        res = await self.client.fetch_pinyin(characters)
        if not res.success:
            logger.info("proxy pinyin lookup for %r failed (%s): %s",
                        characters, res.kind, res.message)
            return None

        syllables: List[str] = res.data
        if len(syllables) != len(characters):
            logger.info("proxy returned %d syllables for %r (expected %d), discarding",
                        len(syllables), characters, len(characters))
            return None
        return syllables

    async def create_word(self, characters: str) -> Optional[Word]:
        """Build a Word with resolved pinyin; None for bad length or failed lookup."""
        if not MIN_WORD_LEN <= len(characters) <= MAX_WORD_LEN:
            return None
        pinyin = await self.lookup_pinyin(characters)
        if pinyin is None or len(pinyin) != len(characters):
            return None
        return Word(characters, tuple(pinyin))

    async def verify_word(self, characters: str) -> bool:
        pinyin = await self.lookup_pinyin(characters)
        return pinyin is not None and len(pinyin) == len(characters)

    # ---------- random targets ----------

    def reset_used_words(self) -> None:
        self._used_words.clear()

    def get_random_word(self, length: int = 2) -> Word:
        """Draw an unused word from the built-in list; recycles once exhausted."""
        words = self.repository.words_of_length(length)
        return self._used_words.draw(words, lambda w: w.characters, self.rng)

    async def fetch_random_word(self, length: int = 2) -> Word:
        """Ask the proxy for a fresh word, else fall back to get_random_word."""
        if self.client is None:
            return self.get_random_word(length)

        res = await self.client.fetch_random_word(length, self._used_words.recent(RECENT_EXCLUDE_LIMIT))
        if not res.success:
            logger.info("proxy random word failed (%s): %s", res.kind, res.message)
        else:
            chars: str = res.data
            if len(chars) == length and chars not in self._used_words:
                word = await self.create_word(chars)
                if word is not None:
                    self._used_words.add(chars)
                    return word
            logger.info("proxy random word %r rejected", chars)

        return self.get_random_word(length)

    # ---------- hints ----------

    async def get_all_hints(self, characters: str, *, is_idiom: bool = False) -> Optional[List[str]]:
        if self.client is None:
            return None

        cached = self._hints_cache.get(characters)
        if cached is not None:
            return list(cached)

        res = await self.client.fetch_hints(characters, is_idiom)
        if not res.success:
            logger.info("hints for %r unavailable (%s): %s", characters, res.kind, res.message)
            return None

        self._hints_cache.put(characters, res.data)
        return list(res.data)

    async def get_word_hint(
            self, characters: str, *, level: int = 1, is_idiom: bool = False) -> Optional[str]:
        """Hint number `level` (1-based), or None."""
        hints = await self.get_all_hints(characters, is_idiom=is_idiom)
        if hints is not None and 1 <= level <= len(hints):
            return hints[level - 1]
        return None
