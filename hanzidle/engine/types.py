"""
Value types shared by the scorer, session and resolver.

MatchStatus doubles as the Wordle pattern alphabet:
  - 'G' : CORRECT  = same value in the same position
  - 'Y' : PRESENT  = value occurs elsewhere in the target
  - '-' : ABSENT   = value not available in the target
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from hanzidle.pinyin import PinyinSyllable, separate

CHANNELS = ("character", "initial", "final")


class MatchStatus(str, Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"


@dataclass(frozen=True)
class Word:
    """
    A word plus one romanized reading per character.

    Readings are stored uppercased; a count mismatch is a construction error.
    """
    characters: str
    pinyin: Tuple[str, ...]

    def __post_init__(self):
        if not self.characters:
            raise ValueError("a word needs at least one character")
        readings = tuple(p.strip().upper() for p in self.pinyin)
        if len(readings) != len(self.characters):
            raise ValueError(
                f"{self.characters!r}: expected {len(self.characters)} readings, got {len(readings)}")
        object.__setattr__(self, "pinyin", readings)

    @property
    def length(self) -> int:
        return len(self.characters)

    @property
    def syllables(self) -> List[PinyinSyllable]:
        return [separate(p) for p in self.pinyin]

    def with_reading(self, index: int, pinyin: str) -> "Word":
        """Copy with the reading at `index` replaced (polyphonic choice)."""
        readings = list(self.pinyin)
        readings[index] = pinyin
        return Word(self.characters, tuple(readings))

    def __len__(self) -> int:
        return len(self.characters)


@dataclass(frozen=True)
class SyllableMatch:
    """Per-position outcome of one guess, three independent channels."""
    syllable: PinyinSyllable
    character: str
    character_status: MatchStatus
    initial_status: MatchStatus
    final_status: MatchStatus

    @property
    def is_correct(self) -> bool:
        return (self.character_status is MatchStatus.CORRECT
                and self.initial_status is MatchStatus.CORRECT
                and self.final_status is MatchStatus.CORRECT)

    @property
    def is_polyphonic_mismatch(self) -> bool:
        # right glyph somewhere else, reading at this spot not nailed yet
        return (self.character_status is MatchStatus.PRESENT
                and (self.initial_status is not MatchStatus.CORRECT
                     or self.final_status is not MatchStatus.CORRECT))


@dataclass(frozen=True)
class GuessResult:
    guessed_word: Word
    matches: Tuple[SyllableMatch, ...]
    is_correct: bool

    def statuses(self, channel: str) -> Tuple[MatchStatus, ...]:
        if channel not in CHANNELS:
            raise ValueError(f"Unknown channel: {channel}. Available: {list(CHANNELS)}")
        return tuple(getattr(m, f"{channel}_status") for m in self.matches)

    def pattern(self, channel: str) -> str:
        """Channel statuses as a 'G'/'Y'/'-' string, e.g. "GY"."""
        return "".join(s.value for s in self.statuses(channel))

    def patterns(self) -> Tuple[str, str, str]:
        """(character, initial, final) patterns; the key used for filtering."""
        return tuple(self.pattern(ch) for ch in CHANNELS)


def make_word(characters: str, pinyin: Sequence[str]) -> Word:
    return Word(characters, tuple(pinyin))
