"""
Vocabulary validator for hanzidle.

What this module does:
- Validate the four vocabulary tables in a data directory:
  words_2.tsv, words_4.tsv (word lists), single_char.tsv, polyphonic.tsv.
- Enforce formatting rules per row (CJK key, readings that decompose into a
  known final, one reading per character for word lists).
- Detect duplicates and invalid rows; compute SHA-256 of the raw files.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from hanzidle.datasets import validate_vocabulary, pretty_summary
    rep = validate_vocabulary("hanzidle/datasets/data")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from hanzidle.pinyin import FINALS, is_cjk, normalize_pinyin, separate, validate_token
from .io import read_table
from .repository import DATA_DIR, POLYPHONIC_FILE, SINGLE_CHAR_FILE, WORD_FILES


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID rows
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique keys among valid rows
    invalid_lines: int   # number of invalid rows encountered


@dataclass
class VocabularyReport:
    """Top-level validation result for a data directory."""
    data_dir: str
    files: Dict[str, FileReport]
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _reading_ok(reading: str) -> bool:
    tok = validate_token(reading)
    return tok is not None and separate(tok).final in FINALS


def _check_rows(path: Path, kind: str, N: int | None) -> Tuple[List[str], int]:
    """
    Load rows and validate them.

    kind:
      - "words":      key has exactly N chars, exactly N readings
      - "single":     one char, exactly one reading
      - "polyphonic": one char, >= 2 readings (tone marks allowed)

    Returns:
      (valid_keys, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    for key, readings in read_table(path):
        if not is_cjk(key) or not readings:
            invalid += 1
            continue

        if kind == "words":
            ok = len(key) == N and len(readings) == N and all(map(_reading_ok, readings))
        elif kind == "single":
            ok = len(key) == 1 and len(readings) == 1 and _reading_ok(readings[0])
        else:
            ok = (len(key) == 1 and len(readings) >= 2
                  and all(_reading_ok(normalize_pinyin(r)) for r in readings))

        if ok:
            valid.append(key)
        else:
            invalid += 1

    return valid, invalid


def _as_dict(rep: VocabularyReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_vocabulary(data_dir: Path | str = DATA_DIR) -> Dict:
    """
    Validate every vocabulary table under `data_dir`.

    Returns
    -------
    Dict
        JSON-serializable VocabularyReport with per-file counts, SHA-256,
        duplicate/invalid diagnostics, a strict `passed` flag (all files
        present, non-empty, no invalid rows, no duplicates) and `issues`.
    """
    d = Path(data_dir)
    issues: List[str] = []
    files: Dict[str, FileReport] = {}

    specs = [(fname, "words", n) for n, fname in sorted(WORD_FILES.items())]
    specs += [(SINGLE_CHAR_FILE, "single", None), (POLYPHONIC_FILE, "polyphonic", None)]

    for fname, kind, N in specs:
        p = d / fname
        if not p.exists():
            issues.append(f"{fname} not found in {d}")
            files[fname] = FileReport(str(p), False, 0, "", 0, 0)
            continue

        keys, invalid = _check_rows(p, kind, N)
        rep = FileReport(
            path=str(p),
            exists=True,
            count=len(keys),
            sha256=_sha256_file(p),
            unique_count=len(set(keys)),
            invalid_lines=invalid,
        )
        files[fname] = rep

        if rep.count == 0:
            issues.append(f"{fname} contains 0 valid rows")
        if invalid:
            issues.append(f"{fname} has {invalid} invalid row(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{fname} contains duplicate entries")

    passed = not issues
    return _as_dict(VocabularyReport(data_dir=str(d), files=files, passed=passed, issues=issues))


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words_2.tsv=247 (uniq=247, sha=abc123...) | ... | OK
    """
    parts = []
    for fname, f in report["files"].items():
        sha = (f.get("sha256") or "")[:12]
        parts.append(f"{fname}={f['count']} (uniq={f['unique_count']}, sha={sha})")
    status = "OK" if report["passed"] else "FAIL"
    return " | ".join(parts + [status])
