from datetime import datetime
from pathlib import Path
from typing import Protocol

from rich.text import Text

from stackpilot.core.env_file import Credentials
from stackpilot.errors.commands import ConfirmationDeclined
from stackpilot.errors.credentials import MissingCredentialsError
from stackpilot.output.console import CONSOLE
from stackpilot.output.styles import Style

AFFIRMATIVE = 'y'


def is_affirmative(answer: str) -> bool:
    return answer == AFFIRMATIVE


class Confirmation(Protocol):
    def ask(self, question: str) -> bool:
        ...


class ConsoleConfirmation:
    def ask(self, question: str) -> bool:
        return is_affirmative(CONSOLE.input(Text(f'{question} (y/N): ', style=Style.info)))


def confirm_destructive(confirmation: Confirmation, warning: str) -> None:
    CONSOLE.print(Text(f'WARNING: {warning}', style=Style.bad))
    if not confirmation.ask('Are you sure?'):
        raise ConfirmationDeclined()


def require_credentials(credentials: Credentials, required: tuple[str, ...], env_file: Path | str) -> None:
    if missing := credentials.missing(required):
        raise MissingCredentialsError(missing, env_file)


def backup_archive_name(now: datetime) -> str:
    return f'backup_{now:%Y%m%d_%H%M%S}.archive'
