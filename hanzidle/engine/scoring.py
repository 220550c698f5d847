"""
Three-channel Wordle-style scoring for a single (target, guess) pair.

Channels, scored independently per position:
  - character : the glyph itself
  - initial   : pinyin initial of that position's reading
  - final     : pinyin final of that position's reading

Each channel uses the canonical two-pass algorithm:
  1) Pass 1 marks exact matches ('G') and consumes those target positions.
  2) Pass 2 walks the remaining guess positions in order; each one claims the
     earliest still-unmatched target position holding the same value ('Y'),
     or is marked absent ('-'). A target occurrence satisfies at most one
     guess position.

The character channel is lenient in pass 2: a glyph that exists anywhere in
the target is 'Y' even when every occurrence has already been consumed
(same glyph, different reading elsewhere).

A guess wins only when every position is 'G' on all three channels, so a
matching glyph with the wrong reading (长 read ZHANG vs CHANG) is not a win.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .types import GuessResult, MatchStatus, SyllableMatch, Word


def match_channel(
        target: Sequence[str],
        guess: Sequence[str],
        *,
        lenient: bool = False,
) -> List[MatchStatus]:
    """
    Score one channel.

    Args:
      target  : per-position target values
      guess   : per-position guessed values (same length)
      lenient : mark 'Y' whenever the value occurs anywhere in `target`,
                even if no unmatched occurrence is left

    Examples:
      match_channel(["XUE", "XI"], ["XI", "XUE"])  -> [Y, Y]
      match_channel(["A", "A"], ["A", "B"])        -> [G, -]
    """
    assert len(target) == len(guess), "Target and guess must be the same length"

    n = len(guess)
    statuses: List[Optional[MatchStatus]] = [None] * n

    # Position-indexed pool; dict keeps ascending index order for pass 2.
    unmatched: Dict[int, str] = {i: t for i, t in enumerate(target)}

    # Pass 1: greens consume their own target slot.
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = MatchStatus.CORRECT
            del unmatched[i]

    # Pass 2: earliest free occurrence wins.
    for i, g in enumerate(guess):
        if statuses[i] is not None:
            continue
        hit = next((j for j, t in unmatched.items() if t == g), None)
        if hit is not None:
            statuses[i] = MatchStatus.PRESENT
            del unmatched[hit]
        elif lenient and g in target:
            statuses[i] = MatchStatus.PRESENT
        else:
            statuses[i] = MatchStatus.ABSENT

    return statuses  # type: ignore[return-value]


def score(target: Word, guess: Word) -> GuessResult:
    """
    Compute the per-position three-channel result for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); violations are programming errors and
        trip an assertion (the session rejects them before calling).
    """
    assert guess.length == target.length, "Guess and target must be the same length"

    target_syl = target.syllables
    guess_syl = guess.syllables

    chars = match_channel(list(target.characters), list(guess.characters), lenient=True)
    initials = match_channel([s.initial for s in target_syl], [s.initial for s in guess_syl])
    finals = match_channel([s.final for s in target_syl], [s.final for s in guess_syl])

    matches = tuple(
        SyllableMatch(
            syllable=guess_syl[i],
            character=guess.characters[i],
            character_status=chars[i],
            initial_status=initials[i],
            final_status=finals[i],
        )
        for i in range(guess.length)
    )
    return GuessResult(
        guessed_word=guess,
        matches=matches,
        is_correct=all(m.is_correct for m in matches),
    )
