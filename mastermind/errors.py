"""
Game Errors - Typed failures returned by the API client.

Every call to the game service resolves to an ApiResult: either a value or
exactly one GameError. The session controller switches on ErrorKind to pick
the message shown to the player, so the taxonomy stays closed:

- NETWORK_ERROR: no response obtained (DNS, refused, timeout, bad URL)
- INVALID_RESPONSE: something came back that is not a usable HTTP response
- SERVER_ERROR: HTTP status outside the handled set for the operation
- GAME_NOT_FOUND: 404 when deleting a game
- INVALID_GUESS: reserved for guess-format rejections
- API_ERROR: structured server error, carries the server's message
- JSON_DECODING_ERROR: 2xx response whose body does not match the schema
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a game error."""
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"
    SERVER_ERROR = "server_error"
    GAME_NOT_FOUND = "game_not_found"
    INVALID_GUESS = "invalid_guess"
    API_ERROR = "api_error"
    JSON_DECODING_ERROR = "json_decoding_error"


DEFAULT_MESSAGES = {
    ErrorKind.NETWORK_ERROR: "Network connection failed",
    ErrorKind.INVALID_RESPONSE: "Invalid response from server",
    ErrorKind.SERVER_ERROR: "Server error occurred",
    ErrorKind.GAME_NOT_FOUND: "Game not found",
    ErrorKind.INVALID_GUESS: "Invalid guess format",
    ErrorKind.API_ERROR: "Server error",
    ErrorKind.JSON_DECODING_ERROR: "Invalid response data from server",
}


class GameError(Exception):
    """Base class for all game service failures."""

    kind: ErrorKind = ErrorKind.SERVER_ERROR

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or DEFAULT_MESSAGES[self.kind]
        self.status_code = status_code
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))


class NetworkError(GameError):
    kind = ErrorKind.NETWORK_ERROR


class InvalidResponse(GameError):
    kind = ErrorKind.INVALID_RESPONSE


class ServerError(GameError):
    kind = ErrorKind.SERVER_ERROR


class GameNotFound(GameError):
    kind = ErrorKind.GAME_NOT_FOUND


class InvalidGuess(GameError):
    kind = ErrorKind.INVALID_GUESS


class ApiError(GameError):
    """A structured error reported by the server, with its own message."""
    kind = ErrorKind.API_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, status_code=status_code)


class JsonDecodingError(GameError):
    kind = ErrorKind.JSON_DECODING_ERROR


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Outcome of one API operation.

    Exactly one of `value` and `error` is meaningful. Operations that have
    no payload (delete) succeed with value None.
    """
    value: Optional[T] = None
    error: Optional[GameError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> ApiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GameError) -> ApiResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value
