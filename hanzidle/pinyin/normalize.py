"""
Text normalization helpers shared by the repository, resolver and CLI.

- normalize_pinyin: strip tone marks ("zhǎng" -> "ZHANG", "lǜ" -> "LV")
- validate_token:   accept a bare uppercase syllable of 1-6 letters
- parse_syllables:  free text ("Xue xi.") -> validated syllable tokens
- extract_cjk:      keep only CJK unified ideographs
"""

from __future__ import annotations

import re
from typing import List, Optional

_TONE_MAP = {
    "ā": "a", "á": "a", "ǎ": "a", "à": "a",
    "ē": "e", "é": "e", "ě": "e", "è": "e",
    "ī": "i", "í": "i", "ǐ": "i", "ì": "i",
    "ō": "o", "ó": "o", "ǒ": "o", "ò": "o",
    "ū": "u", "ú": "u", "ǔ": "u", "ù": "u",
    "ǖ": "v", "ǘ": "v", "ǚ": "v", "ǜ": "v",
    "ü": "v",
}
# Uppercase variants map through their lowercase form.
_TONED_RE = re.compile(
    "[" + "".join(_TONE_MAP) + "".join(_TONE_MAP).upper() + "]"
)
_NON_LETTER_RE = re.compile(r"[^a-zA-Z]")
_NON_UPPER_OR_SPACE_RE = re.compile(r"[^A-Z\s]")
_TOKEN_RE = re.compile(r"^[A-Z]+$")
_NON_CJK_RE = re.compile("[^\u4e00-\u9fff]")

MAX_SYLLABLE_LEN = 6


def normalize_pinyin(pinyin: str) -> str:
    """
    Map toned vowels to bare ASCII (ü-family -> 'v'), drop any other
    non-letter character and uppercase the result.
    """
    bare = _TONED_RE.sub(lambda m: _TONE_MAP.get(m.group(0).lower(), m.group(0)), pinyin)
    return _NON_LETTER_RE.sub("", bare).upper()


def validate_token(token: str) -> Optional[str]:
    """Return the uppercased token if it is 1-6 ASCII letters, else None."""
    upper = token.upper().strip()
    if not _TOKEN_RE.match(upper):
        return None
    if len(upper) > MAX_SYLLABLE_LEN:
        return None
    return upper


def parse_syllables(text: str) -> List[str]:
    """
    Parse a free-text reply such as "xue xi\\n" into ["XUE", "XI"].

    Steps: uppercase, remove everything outside [A-Z] and whitespace, split
    on whitespace, keep only tokens that pass validate_token.
    """
    cleaned = _NON_UPPER_OR_SPACE_RE.sub("", text.upper()).strip()
    out: List[str] = []
    for raw in cleaned.split():
        tok = validate_token(raw)
        if tok is not None:
            out.append(tok)
    return out


def extract_cjk(text: str) -> str:
    """Keep only codepoints in U+4E00..U+9FFF."""
    return _NON_CJK_RE.sub("", text)


def is_cjk(text: str) -> bool:
    return bool(text) and extract_cjk(text) == text
