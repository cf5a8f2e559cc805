"""
User-facing text for the interactive session.

Failures are reported as one line per error kind. Starting a game and
submitting a guess word a few kinds differently, so each has its own table.
"""

from __future__ import annotations

from ..errors import ErrorKind, GameError

SEPARATOR = "=" * 50

WELCOME = (
    "Welcome to Mastermind!\n"
    "Guess the 4-digit code (digits 1-6).\n"
    "B = correct digit in correct position\n"
    "W = correct digit in wrong position\n"
    "Type 'exit' to quit.\n"
)

GUESS_PROMPT = "Enter your guess: "
REPLAY_PROMPT = "\nDo you want to play again? (y/n): "
REPLAY_HINT = "Please enter 'y' for yes, 'n' for no, or 'exit' to quit."
REPLAY_UNREADABLE = "Invalid input. Type 'exit' to quit."
UNREADABLE_INPUT = "Please enter a valid input"
INVALID_FORMAT = "Each guess must be exactly 4 digits, each between 1 and 6"
GOODBYE = "Goodbye!"

NETWORK_MESSAGE = "Network Error: check your internet connection and try again"
DECODING_MESSAGE = "Invalid response Error: try again later"

START_MESSAGES = {
    ErrorKind.NETWORK_ERROR: NETWORK_MESSAGE,
    ErrorKind.SERVER_ERROR: "Server Error: try again later",
    ErrorKind.JSON_DECODING_ERROR: DECODING_MESSAGE,
}
START_FALLBACK = "Error: Could not start game\ntry again"

GUESS_MESSAGES = {
    ErrorKind.INVALID_GUESS: "Error: Invalid guess format",
    ErrorKind.GAME_NOT_FOUND: "Error: Game not found",
    ErrorKind.NETWORK_ERROR: NETWORK_MESSAGE,
    ErrorKind.JSON_DECODING_ERROR: DECODING_MESSAGE,
}
GUESS_FALLBACK = "Error: Could not process guess\nPlease try again"


def _describe(error: GameError, table: dict[ErrorKind, str], fallback: str) -> str:
    if error.kind is ErrorKind.API_ERROR:
        return f"Error: {error.message}"
    return table.get(error.kind, fallback)


def start_error_message(error: GameError) -> str:
    """Message shown when a game could not be created."""
    return _describe(error, START_MESSAGES, START_FALLBACK)


def guess_error_message(error: GameError) -> str:
    """Message shown when a guess could not be scored."""
    return _describe(error, GUESS_MESSAGES, GUESS_FALLBACK)


def attempt_banner(attempt: int) -> str:
    return f"Attempt {attempt}"


def result_line(result: str) -> str:
    return f"Result: {result}"


def win_message(guess: str, attempts: int) -> str:
    noun = "attempt" if attempts == 1 else "attempts"
    return (
        "Congratulations! You guessed the code!\n"
        f"🏆 The secret code was {guess} ({attempts} {noun})"
    )
