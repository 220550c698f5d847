from .types import MatchStatus, Word, SyllableMatch, GuessResult, make_word, CHANNELS
from .scoring import score, match_channel
from .constraints import filter_candidates
from .validation import validate_guess

__all__ = [
    "MatchStatus", "Word", "SyllableMatch", "GuessResult", "make_word", "CHANNELS",
    "score", "match_channel", "filter_candidates", "validate_guess",
]
