"""
Pydantic Schemas for the game service wire contract.

    POST   /game              -> 200 CreateGameResponse
    POST   /guess             GuessRequest -> 200 GuessResponse
    DELETE /game/{game_id}    -> 204 (empty)

Error statuses carry an ErrorResponse body: {"error": "..."}.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

CODE_LENGTH = 4


# =============================================================================
# Requests
# =============================================================================

class GuessRequest(BaseModel):
    """Body of POST /guess."""
    game_id: str
    guess: str = Field(description="Four digits, each 1-6")


# =============================================================================
# Responses
# =============================================================================

class CreateGameResponse(BaseModel):
    """Body of a successful POST /game."""
    game_id: str

    model_config = {"strict": True}


class GuessResponse(BaseModel):
    """Score for one guess."""
    black: int = Field(ge=0, description="Right digit, right position")
    white: int = Field(ge=0, description="Right digit, wrong position")

    model_config = {"strict": True}

    def is_win(self) -> bool:
        """A guess wins when every position is black."""
        return self.black == CODE_LENGTH


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx statuses."""
    error: str


# =============================================================================
# Helpers
# =============================================================================

def parse_error_message(body: Optional[bytes], default: str) -> str:
    """
    Extract the server's error message from a response body.

    Args:
        body: Raw response content (may be empty or not JSON)
        default: Message used when the body has no usable "error" field

    Returns:
        The server message, or `default`
    """
    if not body:
        return default
    try:
        return ErrorResponse.model_validate_json(body).error
    except ValidationError:
        return default


def parse_model(model: type[BaseModel], body: bytes) -> Any:
    """Validate `body` as JSON for `model`; raises ValueError on mismatch."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
