from .syllables import PinyinSyllable, separate, combine, INITIALS, FINALS
from .normalize import normalize_pinyin, validate_token, parse_syllables, extract_cjk, is_cjk

__all__ = [
    "PinyinSyllable", "separate", "combine", "INITIALS", "FINALS",
    "normalize_pinyin", "validate_token", "parse_syllables", "extract_cjk", "is_cjk",
]
