"""
Lightweight guess validation.

A raw guess is acceptable iff:
  - it is a string
  - it consists only of CJK unified ideographs (U+4E00..U+9FFF)
  - it has exact length N

Pinyin is resolved afterwards; a guess does not have to be in the word lists.
"""

from __future__ import annotations

from hanzidle.pinyin import is_cjk


def validate_guess(characters: str, N: int) -> bool:
    """Return True if `characters` is a well-formed N-character guess."""
    if not isinstance(characters, str):
        return False

    c = characters.strip()
    return len(c) == N and is_cjk(c)
