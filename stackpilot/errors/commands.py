from stackpilot.errors.base import StackpilotError


class UsageError(StackpilotError):
    exit_code = 2

    def __init__(self, message: str, example: str | None = None):
        super().__init__(message)
        self.example = example

    def __str__(self):
        if self.example is None:
            return self.args[0]
        return f'{self.args[0]}\nExample: {self.example}'


class UnknownCommandError(UsageError):
    def __init__(self, command: str):
        super().__init__(f'Unknown command: {command!r}', example='stackpilot --help')
        self.command = command


class ConfirmationDeclined(StackpilotError):
    silent = True
