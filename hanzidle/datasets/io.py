from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_table(p: Path | str) -> List[Tuple[str, List[str]]]:
    """
    Read a `key<TAB>value value ...` file into (key, [values]) rows.
    Blank lines and '#' comments are skipped; rows without a tab keep an
    empty value list so validators can flag them.
    """
    rows: List[Tuple[str, List[str]]] = []
    for ln in read_lines(p):
        if not ln.strip() or ln.startswith("#"):
            continue
        key, _, rest = ln.partition("\t")
        rows.append((key.strip(), rest.split()))
    return rows


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
