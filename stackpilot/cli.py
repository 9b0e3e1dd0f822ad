import asyncio
import shlex
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from stackpilot.core.commands import COMMANDS
from stackpilot.core.commands import CommandDescriptor
from stackpilot.core.commands import Group
from stackpilot.core.dispatcher import CommandDispatcher
from stackpilot.core.modes import DEFAULT_MODE
from stackpilot.errors.base import StackpilotError
from stackpilot.output.console import CONSOLE
from stackpilot.output.console import ERR_CONSOLE
from stackpilot.output.styles import Style
from stackpilot.version import get_version

EXAMPLES = (
    ('stackpilot up', 'Start all services in dev mode'),
    ('stackpilot up gateway', 'Start only gateway'),
    ('stackpilot up --mode prod --args "--build"', 'Build and start prod services'),
    ('stackpilot down --args "--volumes"', 'Stop services and remove volumes'),
    ('stackpilot shell backend', 'Open shell in backend'),
    ('stackpilot health', 'Check service health'),
)

app = typer.Typer(
    help='Docker compose stack control for the dev and prod environments.',
    no_args_is_help=True,
    add_completion=False,
)


def run_command(command: str, mode: str | None = None, service: str | None = None,
                args: list[str] | tuple[str, ...] = ()) -> int:
    try:
        returncode = asyncio.run(CommandDispatcher().dispatch(command, mode=mode, service=service, args=args))
    except StackpilotError as e:
        if not e.silent:
            ERR_CONSOLE.print(Text(f'Error: {e}', style=Style.bad))
        return e.exit_code
    except KeyboardInterrupt:
        return 130

    if returncode != 0:
        ERR_CONSOLE.print(Text(f'{command} failed with exit code {returncode}', style=Style.bad))
    return returncode


def _describe_usage(name: str, descriptor: CommandDescriptor) -> str:
    usage = name
    if descriptor.uses_service:
        usage += ' [service]'
    if descriptor.uses_mode:
        usage += ' [--mode prod]'
    if descriptor.passes_args:
        usage += ' [--args "..."]'
    return usage


def _register(name: str, descriptor: CommandDescriptor) -> None:
    def command(
        service: Optional[str] = typer.Argument(
            None, envvar='SERVICE', show_default=False,
            help='Service to scope the command to, all services when omitted.',
        ),
        mode: str = typer.Option(
            DEFAULT_MODE.value, '--mode', '-m', envvar='MODE',
            help='Environment: "prod" selects production, anything else development.',
        ),
        args: str = typer.Option(
            '', '--args', envvar='ARGS', show_default=False,
            help='Extra arguments passed through to docker compose.',
        ),
    ):
        try:
            extra_args = shlex.split(args)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="'--args'")
        raise typer.Exit(run_command(name, mode=mode, service=service, args=extra_args))

    app.command(name=name, help=descriptor.help, rich_help_panel=descriptor.group.value)(command)


for _name, _descriptor in COMMANDS.items():
    _register(_name, _descriptor)


@app.command(name='help', rich_help_panel=Group.UTILITIES.value)
def print_help():
    """Display commands grouped by purpose with usage examples."""
    CONSOLE.print(Text(f'stackpilot {get_version()}', style=Style.info))
    CONSOLE.print('Usage: stackpilot COMMAND [SERVICE] [--mode dev|prod] [--args "<args>"]\n')

    for group in Group:
        table = Table(title=group.value, title_justify='left', show_header=False, box=None, pad_edge=False)
        table.add_column(style=Style.mark, no_wrap=True)
        table.add_column()
        for name, descriptor in COMMANDS.items():
            if descriptor.group is group:
                table.add_row(_describe_usage(name, descriptor), descriptor.help)
        CONSOLE.print(table)
        CONSOLE.print()

    examples = Table(title='Examples', title_justify='left', show_header=False, box=None, pad_edge=False)
    examples.add_column(style=Style.mark, no_wrap=True)
    examples.add_column(style=Style.context)
    for example, description in EXAMPLES:
        examples.add_row(example, f'# {description}')
    CONSOLE.print(examples)


def main():
    app()
