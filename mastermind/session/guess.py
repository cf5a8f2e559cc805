"""
Guess validation and score rendering.

Validation is local and runs before any network call, so a guess that
reaches the API client is always four ASCII digits in the range 1-6.
"""

from __future__ import annotations

from ..api.schemas import CODE_LENGTH, GuessResponse

MIN_DIGIT = 1
MAX_DIGIT = 6
VALID_DIGITS = frozenset(str(d) for d in range(MIN_DIGIT, MAX_DIGIT + 1))


def is_valid_guess(text: str) -> bool:
    """True if `text` is exactly four characters, each a digit 1-6."""
    return len(text) == CODE_LENGTH and all(ch in VALID_DIGITS for ch in text)


def format_result(score: GuessResponse) -> str:
    """
    Render a score as pegs: one 'B' per black, then one 'W' per white.

    (2, 1) renders as "BBW"; (0, 0) renders as "None".
    """
    result = "B" * score.black + "W" * score.white
    return result or "None"
