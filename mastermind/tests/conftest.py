"""
Pytest fixtures for Mastermind tests.
"""

from __future__ import annotations

from typing import Callable, Optional

import httpx
import pytest

from ..api.client import MastermindAPI
from ..api.schemas import GuessResponse
from ..errors import ApiResult, GameError
from .fake_service import FakeGameService

BASE_URL = "http://mastermind.test"


class ScriptedConsole:
    """
    Console that replays scripted input lines and records everything.

    A None entry simulates an unreadable line. Once the script runs out,
    every read is unreadable, so a controller eventually sees a closed stream.
    """

    def __init__(self, lines: list[Optional[str]], events: list | None = None):
        self.lines = list(lines)
        self.events = events if events is not None else []
        self.prompts: list[str] = []
        self.output: list[str] = []

    async def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        self.events.append(("prompt", prompt))
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text: str = "") -> None:
        self.output.append(text)
        self.events.append(("write", text))

    @property
    def text(self) -> str:
        return "\n".join(self.output)


class RecordingAPI:
    """
    Stand-in for MastermindAPI with scripted results.

    Each operation pops the next scripted result; create_game and
    delete_game fall back to success when their script is empty.
    """

    def __init__(self, events: list | None = None):
        self.events = events if events is not None else []
        self.create_results: list[ApiResult] = []
        self.guess_results: list[ApiResult] = []
        self.delete_results: list[ApiResult] = []
        self.created = 0
        self.guesses: list[tuple[str, str]] = []
        self.deleted: list[str] = []

    def score(self, black: int, white: int) -> "RecordingAPI":
        self.guess_results.append(ApiResult.success(GuessResponse(black=black, white=white)))
        return self

    def fail_guess(self, error: GameError) -> "RecordingAPI":
        self.guess_results.append(ApiResult.failure(error))
        return self

    async def create_game(self) -> ApiResult[str]:
        self.created += 1
        self.events.append(("create",))
        if self.create_results:
            return self.create_results.pop(0)
        return ApiResult.success(f"game-{self.created}")

    async def submit_guess(self, game_id: str, guess: str) -> ApiResult[GuessResponse]:
        self.guesses.append((game_id, guess))
        self.events.append(("guess", game_id, guess))
        return self.guess_results.pop(0)

    async def delete_game(self, game_id: str) -> ApiResult[None]:
        self.deleted.append(game_id)
        self.events.append(("delete", game_id))
        if self.delete_results:
            return self.delete_results.pop(0)
        return ApiResult.success()


@pytest.fixture
def events() -> list:
    """Shared, ordered log of console and API activity."""
    return []


@pytest.fixture
def recording_api(events) -> RecordingAPI:
    return RecordingAPI(events)


@pytest.fixture
def make_console(events) -> Callable[..., ScriptedConsole]:
    def factory(*lines: Optional[str]) -> ScriptedConsole:
        return ScriptedConsole(list(lines), events)
    return factory


@pytest.fixture
def fake_service() -> FakeGameService:
    """In-process game service with a known secret."""
    return FakeGameService(secret="1234")


@pytest.fixture
def service_api(fake_service: FakeGameService) -> MastermindAPI:
    """API client wired to the fake service over ASGI."""
    return MastermindAPI(
        base_url=BASE_URL,
        transport=httpx.ASGITransport(app=fake_service.app),
    )


@pytest.fixture
def mock_api() -> Callable[[Callable[[httpx.Request], httpx.Response]], MastermindAPI]:
    """Build an API client whose every request goes to `handler`."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> MastermindAPI:
        return MastermindAPI(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return factory
