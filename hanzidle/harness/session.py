"""
Game session: one hidden target, a guess budget, and the guess history.

State machine:
  IN_PROGRESS --correct guess--> WON
  IN_PROGRESS --last allowed guess, not correct--> LOST
WON and LOST are terminal.

submit_guess returns None (and changes nothing) when the game is already
over or the guess length differs from the target; otherwise it scores the
guess, records the result and returns it.

A session is owned by one player loop; it is not meant to be shared.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from hanzidle.engine import GuessResult, Word, score

MAX_GUESSES = 6

# After this many guesses the next hint becomes due (1st, 2nd hint).
HINT_SCHEDULE = (2, 4)


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameSession:
    def __init__(self, target_word: Word, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {max_guesses}")
        self.target_word = target_word
        self.max_guesses = int(max_guesses)
        self.guesses: List[GuessResult] = []
        self.status = GameStatus.IN_PROGRESS

    @classmethod
    def random(cls, service, *, word_length: int = 2, max_guesses: int = MAX_GUESSES) -> "GameSession":
        """New session on a built-in word the service has not handed out yet."""
        return cls(service.get_random_word(word_length), max_guesses=max_guesses)

    @property
    def is_game_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - len(self.guesses)

    @property
    def word_length(self) -> int:
        return self.target_word.length

    def submit_guess(self, guess: Word) -> Optional[GuessResult]:
        if self.is_game_over:
            return None
        if guess.length != self.target_word.length:
            return None

        result = score(self.target_word, guess)
        self.guesses.append(result)

        if result.is_correct:
            self.status = GameStatus.WON
        elif len(self.guesses) >= self.max_guesses:
            self.status = GameStatus.LOST

        return result


def hints_due(guess_count: int) -> int:
    """Number of hints that should be visible after `guess_count` guesses."""
    return sum(1 for n in HINT_SCHEDULE if guess_count >= n)
