"""
Console - Line-oriented terminal I/O for the session controller.

The controller only needs two primitives: read one line (None when the
stream cannot be read) and write one piece of text.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Optional, Protocol


class Console(Protocol):
    """Terminal primitives used by the session controller."""

    async def read_line(self, prompt: str = "") -> Optional[str]:
        ...

    def write(self, text: str = "") -> None:
        ...


def _resolve(future: asyncio.Future, line: Optional[str]) -> None:
    if not future.done():
        future.set_result(line)


class TerminalConsole:
    """
    Console backed by stdin/stdout.

    input() blocks, so each read runs on a daemon thread and hands the line
    back to the event loop. A pending read never keeps the process alive.
    """

    async def read_line(self, prompt: str = "") -> Optional[str]:
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def worker() -> None:
            try:
                line: Optional[str] = input(prompt)
            except EOFError:
                line = None
            try:
                loop.call_soon_threadsafe(_resolve, future, line)
            except RuntimeError:
                # loop already closed
                pass

        threading.Thread(target=worker, name="stdin-reader", daemon=True).start()
        return await future

    def write(self, text: str = "") -> None:
        print(text, flush=True)
