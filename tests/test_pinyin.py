import pytest
from hanzidle.pinyin import (
    FINALS, INITIALS, PinyinSyllable, combine, extract_cjk, is_cjk, normalize_pinyin,
    parse_syllables, separate, validate_token,
)


# --- decomposition ---
@pytest.mark.parametrize("token,initial,final", [
    ("ZHONG", "ZH", "ONG"),
    ("zhong", "ZH", "ONG"),
    ("  chi ", "CH", "I"),
    ("SHUANG", "SH", "UANG"),
    ("ZI", "Z", "I"),
    ("HUI", "H", "UI"),
    ("CI", "C", "I"),
    ("AN", "", "AN"),
    ("ER", "", "ER"),
    ("LV", "L", "V"),
])
def test_separate_golden(token, initial, final):
    assert separate(token) == PinyinSyllable(initial, final)


def test_separate_prefers_two_letter_initials():
    for tok in ["ZHANG", "CHANG", "SHANG"]:
        s = separate(tok)
        assert len(s.initial) == 2 and s.final == "ANG"


def test_separate_is_total_on_junk():
    assert separate("") == PinyinSyllable("", "")
    assert separate("123") == PinyinSyllable("", "123")


def test_separate_inverts_combine_for_all_valid_pairs():
    for i in ("",) + INITIALS:
        for f in FINALS:
            assert separate(combine(i, f).upper()) == PinyinSyllable(i, f)


def test_combine_lowercases():
    assert combine("ZH", "ONG") == "zhong"


def test_syllable_equality_ignores_case():
    a = PinyinSyllable("zh", "ong")
    b = PinyinSyllable("ZH", "ONG")
    assert a == b and hash(a) == hash(b)
    assert str(separate("hui")) == "H/UI"


@pytest.mark.parametrize("token,display", [
    ("NV", "Ü"),
    ("LVE", "ÜE"),
    ("JU", "Ü"),
    ("XUE", "ÜE"),
    ("QUAN", "ÜAN"),
    ("YUN", "ÜN"),
    ("GUAN", "UAN"),
    ("WU", "U"),
    ("LU", "U"),
])
def test_display_final(token, display):
    s = separate(token)
    assert s.display_final == display
    # display form never leaks into the matching value
    assert "Ü" not in s.final


# --- normalization ---
@pytest.mark.parametrize("raw,expected", [
    ("zhǎng", "ZHANG"),
    ("lǜ", "LV"),
    ("NÜ", "NV"),
    ("FĀ", "FA"),
    ("Ě", "E"),
    ("xue2", "XUE"),
    ("ZHUÀN", "ZHUAN"),
])
def test_normalize_pinyin(raw, expected):
    assert normalize_pinyin(raw) == expected


def test_validate_token():
    assert validate_token("abc") == "ABC"
    assert validate_token(" xi ") == "XI"
    assert validate_token("ABCDEFG") is None
    assert validate_token("") is None
    assert validate_token("A1") is None


def test_parse_syllables_cleans_free_text():
    assert parse_syllables("Xue xi.\n") == ["XUE", "XI"]
    assert parse_syllables("DIAN, NAO!") == ["DIAN", "NAO"]
    assert parse_syllables("学习 XUE XI") == ["XUE", "XI"]
    # over-long tokens are discarded, not truncated
    assert parse_syllables("ZHUANGG XI") == ["XI"]


def test_cjk_helpers():
    assert extract_cjk("答案：学习。") == "答案学习"
    assert is_cjk("学习") is True
    assert is_cjk("学a") is False
    assert is_cjk("") is False
