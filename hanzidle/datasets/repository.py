"""
Static vocabulary: word lists, single-character readings, polyphonic table.

Files (UTF-8, one entry per line, see data/):
  - words_2.tsv     2-character words        学习<TAB>XUE XI
  - words_4.tsv     4-character idioms       一心一意<TAB>YI XIN YI YI
  - single_char.tsv canonical reading        的<TAB>DE
  - polyphonic.tsv  readings, default first  长<TAB>CHANG ZHANG (may be toned)

The repository is loaded once and never mutated afterwards, so a single
instance can back any number of concurrent lookups.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

from hanzidle.engine.types import Word
from hanzidle.pinyin import normalize_pinyin
from .io import read_table

DATA_DIR = Path(__file__).parent / "data"

WORD_FILES = {2: "words_2.tsv", 4: "words_4.tsv"}
SINGLE_CHAR_FILE = "single_char.tsv"
POLYPHONIC_FILE = "polyphonic.tsv"

# Lengths outside WORD_FILES get this list (kept as-is; see DESIGN.md).
DEFAULT_LENGTH = 2


class VocabularyRepository:
    """Read-only lookup primitives over the vocabulary tables."""

    def __init__(
            self,
            *,
            words: Mapping[int, List[Word]],
            single_char: Mapping[str, str],
            polyphonic: Mapping[str, List[str]],
    ):
        self._words: Mapping[int, Tuple[Word, ...]] = MappingProxyType(
            {n: tuple(ws) for n, ws in words.items()})
        self._single_char = MappingProxyType(dict(single_char))
        self._polyphonic = MappingProxyType({c: tuple(rs) for c, rs in polyphonic.items()})

    @classmethod
    def from_dir(cls, data_dir: Path | str = DATA_DIR) -> "VocabularyRepository":
        """
        Load every table from `data_dir`. Missing files raise FileNotFoundError;
        rows that cannot form a Word are skipped (the validator reports them).
        """
        d = Path(data_dir)

        words: Dict[int, List[Word]] = {}
        for n, fname in WORD_FILES.items():
            ws: List[Word] = []
            for chars, readings in read_table(d / fname):
                if len(chars) == n and len(readings) == n:
                    ws.append(Word(chars, tuple(readings)))
            words[n] = ws

        single = {c: r[0].upper() for c, r in read_table(d / SINGLE_CHAR_FILE) if r}
        poly = {c: r for c, r in read_table(d / POLYPHONIC_FILE) if r}
        return cls(words=words, single_char=single, polyphonic=poly)

    # ---- word lists ----

    def words_of_length(self, n: int) -> List[Word]:
        """Configured list for n; any other length falls back to the 2-char list."""
        if n not in self._words:
            n = DEFAULT_LENGTH
        return list(self._words.get(n, ()))

    def available_word_lengths(self) -> List[int]:
        return sorted(WORD_FILES)

    def _all_words(self) -> List[Word]:
        out: List[Word] = []
        for n in sorted(self._words):
            out.extend(self._words[n])
        return out

    # ---- polyphonic characters ----

    def is_polyphonic(self, character: str) -> bool:
        return character in self._polyphonic

    def pinyin_options(self, character: str) -> List[str]:
        """Normalized readings in preference order, [] if not polyphonic."""
        return [normalize_pinyin(p) for p in self._polyphonic.get(character, ())]

    # ---- lookups ----

    def candidates_for_pinyin(self, pinyin: str) -> Set[str]:
        """Every character recorded with exactly this reading in any word list."""
        upper = pinyin.upper()
        out: Set[str] = set()
        for w in self._all_words():
            for ch, p in zip(w.characters, w.pinyin):
                if p == upper:
                    out.add(ch)
        return out

    def _char_from_words(self, character: str) -> Optional[str]:
        for w in self._all_words():
            idx = w.characters.find(character)
            if idx >= 0:
                return w.pinyin[idx]
        return None

    def built_in_lookup(self, characters: str) -> Optional[List[str]]:
        """
        Resolve one reading per character, or None if any character fails.

        Priority per character:
          1) single-character table
          2) first word (2-char list, then 4-char list) containing it
          3) default (first) polyphonic reading, tone marks stripped
        """
        result: List[str] = []
        for ch in characters:
            pinyin = self._single_char.get(ch)
            if pinyin is None:
                pinyin = self._char_from_words(ch)
            if pinyin is None and ch in self._polyphonic:
                pinyin = normalize_pinyin(self._polyphonic[ch][0])
            if pinyin is None:
                return None
            result.append(pinyin)
        return result


def pinyin_letter_count(pinyin_list: List[str]) -> int:
    """Total number of letters across readings: ["XUE", "XI"] -> 5."""
    return sum(len(p) for p in pinyin_list)
