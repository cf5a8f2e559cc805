"""
Session Module - The interactive game loop.

A session is one server-assigned game plus its local state:
- Created when the player starts (or replays) a game
- Collects guesses, validates them locally, sends them for scoring
- Deleted on the service when the player wins or exits

At most one game is live at a time, owned by the SessionController.
Nothing is persisted between runs.
"""

from .console import Console, TerminalConsole
from .controller import GameSession, SessionController, SessionState
from .guess import format_result, is_valid_guess

__all__ = [
    "Console",
    "TerminalConsole",
    "GameSession",
    "SessionController",
    "SessionState",
    "format_result",
    "is_valid_guess",
]
