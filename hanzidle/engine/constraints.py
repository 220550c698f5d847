"""
Candidate filtering given game history.

Given:
  - a pool of vocabulary words (e.g., the 2-character list)
  - a history of GuessResult objects produced by the scorer

Return:
  - words that, as the hidden target, would have produced exactly the same
    character/initial/final patterns for every recorded guess.

Used to tell the player how many words are still consistent with the
feedback so far.
"""

from __future__ import annotations

from typing import Iterable, List

from .scoring import score
from .types import GuessResult, Word


def filter_candidates(words: Iterable[Word], history: Iterable[GuessResult]) -> List[Word]:
    """
    Keep only words that reproduce every recorded (guess, patterns) pair.

    Words whose length differs from a recorded guess are dropped.
    Order of `words` is preserved.
    """
    history = list(history)
    out: List[Word] = []

    for w in words:
        consistent = True
        for r in history:
            g = r.guessed_word
            # Scoring this candidate as the target must reproduce the old feedback
            if w.length != g.length or score(w, g).patterns() != r.patterns():
                consistent = False
                break

        if consistent:
            out.append(w)

    return out
