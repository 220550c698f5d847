from .session import GameSession, GameStatus, MAX_GUESSES, hints_due
from .render import format_result, format_board

__all__ = ["GameSession", "GameStatus", "MAX_GUESSES", "hints_due", "format_result", "format_board"]
