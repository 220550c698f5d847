from pathlib import Path
from hanzidle.datasets import DATA_DIR, pretty_summary, validate_vocabulary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _tables(d: Path, *, words_2=None, words_4=None, single=None, poly=None):
    _write(d / "words_2.tsv", words_2 or ["学习\tXUE XI", "时间\tSHI JIAN"])
    _write(d / "words_4.tsv", words_4 or ["一心一意\tYI XIN YI YI"])
    _write(d / "single_char.tsv", single or ["学\tXUE", "习\tXI"])
    _write(d / "polyphonic.tsv", poly or ["长\tCHÁNG ZHǍNG", "行\tXING HANG"])


def test_bundled_tables_pass():
    rep = validate_vocabulary(DATA_DIR)
    assert rep["passed"] is True, rep["issues"]
    assert rep["files"]["words_2.tsv"]["count"] == 247
    assert rep["files"]["words_4.tsv"]["count"] == 118
    s = pretty_summary(rep)
    assert s.endswith("| OK")
    assert "words_2.tsv=247" in s


def test_validate_vocabulary_happy_path(tmp_path: Path):
    _tables(tmp_path)
    rep = validate_vocabulary(tmp_path)
    assert rep["passed"] is True
    assert rep["files"]["polyphonic.tsv"]["count"] == 2
    assert len(rep["files"]["single_char.tsv"]["sha256"]) == 64


def test_validate_vocabulary_flags_errors(tmp_path: Path):
    _tables(
        tmp_path,
        # wrong reading count, non-CJK key, unknown final
        words_2=["学习\tXUE XI", "学校\tXUE", "ab\tA B", "时间\tSHI JXQ"],
        # duplicate key
        single=["学\tXUE", "学\tXUE"],
        # a polyphonic entry needs two readings
        poly=["长\tCHANG"],
    )
    rep = validate_vocabulary(tmp_path)
    assert rep["passed"] is False
    assert rep["files"]["words_2.tsv"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("0 valid rows" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_missing_files_are_reported(tmp_path: Path):
    rep = validate_vocabulary(tmp_path)
    assert rep["passed"] is False
    assert rep["files"]["words_4.tsv"]["exists"] is False
    assert sum("not found" in msg for msg in rep["issues"]) == 4
