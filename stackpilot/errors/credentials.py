from stackpilot.errors.base import StackpilotError


class MissingCredentialsError(StackpilotError):
    def __init__(self, missing: list[str], env_file):
        self.missing = missing
        self.env_file = env_file
        super().__init__(f'Could not parse {", ".join(missing)} from {env_file} file')
