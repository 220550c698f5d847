"""
Plain-text rendering of guess results for terminal front-ends.

One guess renders as one line:
    长大  CH/ANG D/A  char=GG  ini=-G  fin=GG
Polyphonic mismatches (right glyph elsewhere, reading not nailed here) are
flagged with '*' after the syllable.
"""

from __future__ import annotations

from typing import Iterable, List

from hanzidle.engine import GuessResult, SyllableMatch


def format_syllable(m: SyllableMatch) -> str:
    s = f"{m.syllable.display_initial}/{m.syllable.display_final}"
    return s + "*" if m.is_polyphonic_mismatch else s


def format_result(result: GuessResult) -> str:
    syllables = " ".join(format_syllable(m) for m in result.matches)
    return (
        f"{result.guessed_word.characters}  {syllables}  "
        f"char={result.pattern('character')}  "
        f"ini={result.pattern('initial')}  "
        f"fin={result.pattern('final')}"
    )


def format_board(results: Iterable[GuessResult]) -> List[str]:
    return [f"{i}. {format_result(r)}" for i, r in enumerate(results, start=1)]
