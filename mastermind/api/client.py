"""
Mastermind API client.

Stateless translator between the three game operations and the HTTP
contract of the game service. Each operation returns an ApiResult and never
raises: HTTP statuses become typed GameErrors, and anything that prevents a
response (DNS, refused connection, timeout) becomes a NetworkError.

Usage:
    async with MastermindAPI() as api:
        created = await api.create_game()
        if created.ok:
            scored = await api.submit_guess(created.value, "1234")
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar
from urllib.parse import quote

import httpx

from ..config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from ..errors import (
    ApiError,
    ApiResult,
    GameError,
    GameNotFound,
    InvalidResponse,
    JsonDecodingError,
    NetworkError,
    ServerError,
)
from .schemas import CreateGameResponse, GuessRequest, GuessResponse, parse_error_message, parse_model

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class MastermindAPI:
    """
    HTTP client for the game service.

    Holds only the base URL and the underlying httpx client. `transport` is
    passed through to httpx so tests can use MockTransport or ASGITransport.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout or DEFAULT_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> MastermindAPI:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Operations
    # =========================================================================

    async def create_game(self) -> ApiResult[str]:
        """Create a game and return its id."""

        async def call() -> str:
            response = await self._send("POST", "/game", headers=JSON_HEADERS)
            if response.status_code == 200:
                return self._decode(CreateGameResponse, response).game_id
            raise self._status_error(response, {500: "Server error"})

        return await self._run("create_game", call)

    async def submit_guess(self, game_id: str, guess: str) -> ApiResult[GuessResponse]:
        """Submit a guess and return its black/white score."""

        async def call() -> GuessResponse:
            body = GuessRequest(game_id=game_id, guess=guess).model_dump()
            response = await self._send("POST", "/guess", json=body, headers=JSON_HEADERS)
            if response.status_code == 200:
                return self._decode(GuessResponse, response)
            raise self._status_error(
                response,
                {400: "Invalid guess", 404: "Game not found", 500: "Server error"},
            )

        return await self._run("submit_guess", call)

    async def delete_game(self, game_id: str) -> ApiResult[None]:
        """Delete a game. Succeeds with no value on 204."""

        async def call() -> None:
            path = f"/game/{quote(game_id, safe='')}"
            response = await self._send("DELETE", path, headers={"Accept": "application/json"})
            if response.status_code == 204:
                return None
            if response.status_code == 404:
                raise GameNotFound(status_code=404)
            raise self._status_error(response, {500: "Server error"})

        return await self._run("delete_game", call)

    # =========================================================================
    # Plumbing
    # =========================================================================

    async def _run(self, operation: str, call: Callable[[], Awaitable[T]]) -> ApiResult[T]:
        """Run one operation, folding every failure into an ApiResult."""
        try:
            return ApiResult.success(await call())
        except GameError as error:
            logger.info("%s failed: %s (%s)", operation, error.kind.value, error.message)
            return ApiResult.failure(error)
        except Exception:
            logger.debug("%s failed unexpectedly", operation, exc_info=True)
            return ApiResult.failure(NetworkError())

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Issue one request, translating transport failures to GameErrors."""
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            client = await self._get_client()
            response = await client.request(method, path, **kwargs)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise NetworkError() from exc
        except (httpx.RemoteProtocolError, httpx.DecodingError) as exc:
            raise InvalidResponse() from exc
        except httpx.TransportError as exc:
            raise NetworkError() from exc
        logger.debug("%s %s -> %d", method, path, response.status_code)
        return response

    @staticmethod
    def _decode(model: type, response: httpx.Response) -> Any:
        try:
            return parse_model(model, response.content)
        except ValueError as exc:
            raise JsonDecodingError(status_code=response.status_code) from exc

    @staticmethod
    def _status_error(response: httpx.Response, api_errors: dict[int, str]) -> GameError:
        """
        Map a non-success status to a GameError.

        Args:
            response: The HTTP response
            api_errors: Statuses that carry a server message, with the
                default message used when the body has none

        Returns:
            ApiError for the listed statuses, ServerError otherwise
        """
        status = response.status_code
        if status in api_errors:
            message = parse_error_message(response.content, api_errors[status])
            return ApiError(message, status_code=status)
        return ServerError(status_code=status)
