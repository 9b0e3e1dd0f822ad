import asyncio
import shlex
import sys
from asyncio import subprocess
from pathlib import Path
from typing import Protocol

from rich.text import Text

from stackpilot.errors.relay import RelayError
from stackpilot.output.console import CONSOLE
from stackpilot.output.styles import Style


def format_command(argv: list[str]) -> str:
    return ' '.join(shlex.quote(part) for part in argv)


class Relay(Protocol):
    async def run(self, argv: list[str], cwd: Path | str | None = None, quiet: bool = False) -> int:
        ...


class ProcessRelay:
    """
    Runs one external tool with the operator's terminal attached and waits for it.

    stdin/stdout are inherited so interactive shells, `logs -f` and prompts of the
    relayed tool behave as if it was started directly; Ctrl-C is handled by it too.
    """

    def __init__(self, debug_commands: bool = False):
        self.debug_commands = debug_commands

    async def run(self, argv: list[str], cwd: Path | str | None = None, quiet: bool = False) -> int:
        sys.stdout.flush()

        debug = f'; in {cwd or "."}' if self.debug_commands else ''
        CONSOLE.print(Text(
            format_command(argv),
            style=Style.context
        ) + Text(
            debug,
            style=Style.regular
        ))

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=cwd,
                stderr=subprocess.DEVNULL if quiet else None,
            )
        except FileNotFoundError as e:
            raise RelayError(argv, e.filename or argv[0]) from e

        return await process.wait()
