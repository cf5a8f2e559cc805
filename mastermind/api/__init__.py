"""
API Module - Client for the remote Mastermind game service.

The service is authoritative for secret codes and scoring; this module only
speaks its HTTP contract and reports typed results.
"""

from .client import MastermindAPI
from .schemas import (
    CreateGameResponse,
    ErrorResponse,
    GuessRequest,
    GuessResponse,
    parse_error_message,
)

__all__ = [
    "MastermindAPI",
    "CreateGameResponse",
    "ErrorResponse",
    "GuessRequest",
    "GuessResponse",
    "parse_error_message",
]
