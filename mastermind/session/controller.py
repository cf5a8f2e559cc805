"""
Session Controller - Drives one interactive game end-to-end.

STATES:
    IDLE -> AWAITING_GUESS -> SCORING -> AWAITING_GUESS | WON | EXITING
    WON (and a failed start) -> REPLAY_PROMPT -> IDLE (new game) | EXITING

RULES:
- Guesses are validated locally; invalid input never reaches the service
  and does not count as an attempt
- Server and network failures are reported and the loop continues
- Deleting a game on win/exit is best-effort: failures are never shown
- "exit" at the guess prompt ends the process without a replay prompt
- Every re-prompt is a loop iteration, never a recursive call
- An unreadable line re-prompts, at the guess and replay prompts alike;
  max_unreadable_reads in a row means stdin is closed, and the process
  exits after a best-effort delete
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..api.client import MastermindAPI
from . import messages
from .console import Console
from .guess import format_result, is_valid_guess

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_START_FAILED = 1


class SessionState(Enum):
    """Where the controller is in the game lifecycle."""
    IDLE = "idle"
    AWAITING_GUESS = "awaiting_guess"
    SCORING = "scoring"
    WON = "won"
    REPLAY_PROMPT = "replay_prompt"
    EXITING = "exiting"


@dataclass
class GameSession:
    """
    The one live game on the service.

    `game_id` is None before creation and after deletion.
    """
    game_id: Optional[str] = None
    attempts: int = 0

    def is_live(self) -> bool:
        return self.game_id is not None


class InputClosed(Exception):
    """The input stream stayed unreadable; treat it as closed."""


class SessionController:
    """
    Interactive loop over a MastermindAPI.

    Usage:
        controller = SessionController(api, TerminalConsole())
        exit_code = await controller.run()
    """

    def __init__(
        self,
        api: MastermindAPI,
        console: Console,
        max_unreadable_reads: int = 3,
    ):
        self.api = api
        self.console = console
        self.max_unreadable_reads = max(1, max_unreadable_reads)
        self.session = GameSession()
        self.state = SessionState.IDLE
        self.start_failed = False
        self._unreadable_reads = 0

    async def run(self) -> int:
        """
        Play games until the player leaves.

        Returns:
            Process exit code: 0, or 1 when the player leaves right after a
            game could not be started
        """
        try:
            while True:
                if await self.start():
                    if await self.play() is SessionState.EXITING:
                        return self._finish()
                if not await self.ask_replay():
                    return self._finish()
                self.console.write("\n" + messages.SEPARATOR)
        except InputClosed:
            logger.info("Input stream closed")
            await self.close_game()
            return self._finish()
        except (KeyboardInterrupt, asyncio.CancelledError):
            await self.close_game()
            raise

    async def start(self) -> bool:
        """IDLE: create a fresh game. Returns False if creation failed."""
        self.state = SessionState.IDLE
        self.session = GameSession()
        self.console.write(messages.WELCOME)

        result = await self.api.create_game()
        if not result.ok:
            self.start_failed = True
            self.console.write(messages.start_error_message(result.error))
            return False

        self.start_failed = False
        self.session.game_id = result.value
        logger.debug("Started game %s", result.value)
        return True

    async def play(self) -> SessionState:
        """
        AWAITING_GUESS loop.

        Returns:
            SessionState.WON or SessionState.EXITING
        """
        while True:
            self.state = SessionState.AWAITING_GUESS
            self.console.write(messages.attempt_banner(self.session.attempts + 1))

            line = await self._read_line(messages.GUESS_PROMPT)
            if line is None:
                self.console.write(messages.UNREADABLE_INPUT)
                continue

            text = line.strip()
            if text.lower() == "exit":
                self.state = SessionState.EXITING
                await self.close_game()
                return SessionState.EXITING

            if not is_valid_guess(text):
                self.console.write(messages.INVALID_FORMAT)
                continue

            if await self.submit(text):
                return SessionState.WON

    async def submit(self, guess: str) -> bool:
        """SCORING: send a valid guess. Returns True if it won the game."""
        self.session.attempts += 1
        self.state = SessionState.SCORING

        result = await self.api.submit_guess(self.session.game_id, guess)
        if not result.ok:
            self.console.write(messages.guess_error_message(result.error))
            return False

        score = result.value
        if score.is_win():
            self.state = SessionState.WON
            self.console.write(messages.win_message(guess, self.session.attempts))
            await self.close_game()
            return True

        self.console.write(messages.result_line(format_result(score)))
        return False

    async def ask_replay(self) -> bool:
        """REPLAY_PROMPT: True to start a new game, False to leave."""
        self.state = SessionState.REPLAY_PROMPT
        while True:
            line = await self._read_line(messages.REPLAY_PROMPT)
            if line is None:
                self.console.write(messages.REPLAY_UNREADABLE)
                continue

            answer = line.strip().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no", "exit"):
                return False
            self.console.write(messages.REPLAY_HINT)

    async def close_game(self) -> None:
        """Best-effort delete of the live game; failures are only logged."""
        if not self.session.is_live():
            return
        game_id = self.session.game_id
        self.session.game_id = None
        result = await self.api.delete_game(game_id)
        if not result.ok:
            logger.debug("Ignoring failed delete of %s: %s", game_id, result.error.kind.value)

    async def _read_line(self, prompt: str) -> Optional[str]:
        line = await self.console.read_line(prompt)
        if line is not None:
            self._unreadable_reads = 0
            return line
        self._unreadable_reads += 1
        if self._unreadable_reads >= self.max_unreadable_reads:
            raise InputClosed()
        return None

    def _finish(self) -> int:
        self.state = SessionState.EXITING
        self.console.write(messages.GOODBYE)
        return EXIT_START_FAILED if self.start_failed else EXIT_OK
