from stackpilot.errors.base import StackpilotError


class RelayError(StackpilotError):
    exit_code = 127

    def __init__(self, argv: list[str], missing: str):
        self.argv = argv
        self.missing = missing
        super().__init__(f"Can't run {argv[0]}: {missing} not found")
