"""
Mastermind CLI - Play against the remote game service.

Usage:
    mastermind                       Start an interactive game
    mastermind --base-url URL        Use another game service
    mastermind --timeout SECONDS     Per-request timeout
    mastermind -v                    Debug logging on stderr
"""

import argparse
import asyncio
import logging
import sys

from . import __version__
from .api import MastermindAPI
from .config import ClientConfig
from .session import SessionController, TerminalConsole
from .session.messages import GOODBYE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mastermind - guess the 4-digit code (digits 1-6)",
        prog="mastermind",
    )
    parser.add_argument("--base-url", help="Game service URL (env: MASTERMIND_API_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (env: MASTERMIND_TIMEOUT)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: int) -> None:
    """Send diagnostics to stderr so they never mix with game output."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def play(config: ClientConfig) -> int:
    """Run interactive games until the player leaves; returns the exit code."""
    async with MastermindAPI(base_url=config.base_url, timeout=config.timeout) as api:
        controller = SessionController(api, TerminalConsole())
        return await controller.run()


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    config = ClientConfig.from_env(
        base_url=args.base_url,
        timeout=args.timeout,
        verbose=args.verbose,
    )
    configure_logging(config.log_level)

    try:
        exit_code = asyncio.run(play(config))
    except KeyboardInterrupt:
        print("\n" + GOODBYE)
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
