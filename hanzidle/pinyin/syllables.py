"""
Pinyin syllable decomposition.

A romanized Mandarin syllable splits into:
  - initial (声母): consonant cluster prefix, possibly empty
  - final   (韵母): the vowel cluster that remains

Conventions:
  - Everything is uppercase ASCII, no tone marks ('V' stands for 'Ü').
  - Zero-initial syllables (e.g. "AN", "ER") have initial == "".

Algorithm:
  Scan INITIALS in list order and take the first one that prefixes the token.
  The list puts ZH/CH/SH ahead of the single letters, so the first hit is
  always the longest available ("ZHONG" -> ZH + ONG, never Z + HONG).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Two-letter initials must stay in front of Z/C/S.
INITIALS: Tuple[str, ...] = (
    "ZH", "CH", "SH",
    "B", "P", "M", "F", "D", "T", "N", "L", "G", "K", "H",
    "J", "Q", "X", "R", "Z", "C", "S", "Y", "W",
)

FINALS: Tuple[str, ...] = (
    "IANG", "IONG", "UANG", "UENG",
    "ANG", "ENG", "ING", "ONG", "UNG",
    "IAO", "IAN", "UAN", "UEN", "UEI", "UAI", "IOU",
    "AI", "EI", "AO", "OU", "AN", "EN", "IN", "UN",
    "IA", "IE", "IU", "IO", "UA", "UO", "UE", "UI", "VE", "ER",
    "A", "O", "E", "I", "U", "V",
)

# After these initials a written U is pronounced Ü.
_U_AS_UMLAUT_INITIALS = {"Y", "J", "Q", "X"}
_UMLAUT_FINALS = {"U": "Ü", "UE": "ÜE", "UN": "ÜN", "UAN": "ÜAN"}


@dataclass(frozen=True)
class PinyinSyllable:
    """Immutable (initial, final) pair; both fields are stored uppercased."""
    initial: str
    final: str

    def __post_init__(self):
        # uppercase on the way in so equality/hashing are case-insensitive
        object.__setattr__(self, "initial", self.initial.upper())
        object.__setattr__(self, "final", self.final.upper())

    @property
    def display_initial(self) -> str:
        return self.initial

    @property
    def display_final(self) -> str:
        """
        Presentation form of the final (never used for matching).

        Examples:
          NV  -> final "Ü"
          JU  -> final "Ü"
          XUE -> final "ÜE"
          GUAN -> final "UAN" (G is not one of Y/J/Q/X)
        """
        result = self.final.replace("V", "Ü")
        if self.initial in _U_AS_UMLAUT_INITIALS:
            result = _UMLAUT_FINALS.get(result, result)
        return result

    def __str__(self) -> str:
        return f"{self.initial}/{self.final}"


def separate(pinyin: str) -> PinyinSyllable:
    """
    Split a romanized syllable into (initial, final).

    Total function: never raises. Empty or junk input yields an empty initial
    and whatever remains as the final; callers reject such syllables.

    Examples:
      separate("zhong") -> ZH/ONG
      separate("HUI")   -> H/UI
      separate("an")    -> /AN
    """
    upper = pinyin.upper().strip()

    found = ""
    for initial in INITIALS:
        if upper.startswith(initial):
            found = initial
            break

    return PinyinSyllable(found, upper[len(found):])


def combine(initial: str, final: str) -> str:
    """Rebuild a lowercase syllable from its parts: combine("ZH", "ONG") -> "zhong"."""
    return f"{initial}{final}".lower()
