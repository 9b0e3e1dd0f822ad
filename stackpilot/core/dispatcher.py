"""
Command dispatch.

Every command of the `COMMANDS` table becomes one relay to an external tool:

> docker compose -f %topology% up -d %args% %service%
> docker compose -f %topology% exec mongodb mongosh -u .. -p .. --authenticationDatabase admin %db%
> npm run build                        (in the backend directory)

Mode, target service and extra arguments are resolved here from the descriptor
and the operator's selectors. Credentials are read from the `.env` file only for
commands that declare them, and checked before anything is relayed.
"""
from datetime import datetime
from typing import Callable
from typing import NamedTuple

from rich.text import Text

from stackpilot.core.commands import Action
from stackpilot.core.commands import COMMANDS
from stackpilot.core.commands import CommandDescriptor
from stackpilot.core.compose_interface import ComposeShellInterface
from stackpilot.core.config import Config
from stackpilot.core.env_file import Credentials
from stackpilot.core.env_file import read_credentials
from stackpilot.core.guards import Confirmation
from stackpilot.core.guards import ConsoleConfirmation
from stackpilot.core.guards import backup_archive_name
from stackpilot.core.guards import confirm_destructive
from stackpilot.core.guards import require_credentials
from stackpilot.core.health import HealthVerifier
from stackpilot.core.modes import Mode
from stackpilot.core.modes import resolve_mode
from stackpilot.core.modes import topology_for
from stackpilot.core.relay import ProcessRelay
from stackpilot.core.relay import Relay
from stackpilot.errors.commands import UnknownCommandError
from stackpilot.errors.commands import UsageError
from stackpilot.output.console import CONSOLE
from stackpilot.output.styles import Style


class Invocation(NamedTuple):
    command: str
    descriptor: CommandDescriptor
    mode: Mode
    topology: str
    service: str | None
    args: tuple[str, ...]
    credentials: Credentials | None = None


class CommandDispatcher:
    def __init__(self,
                 config: Config | None = None,
                 relay: Relay | None = None,
                 confirmation: Confirmation | None = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.config = config if config is not None else Config()
        self.relay = relay if relay is not None else ProcessRelay(self.config.debug_commands)
        self.confirmation = confirmation if confirmation is not None else ConsoleConfirmation()
        self.clock = clock
        self._handlers = {
            Action.UP: self._up,
            Action.DOWN: self._down,
            Action.BUILD: self._build,
            Action.RESTART: self._restart,
            Action.LOGS: self._logs,
            Action.PS: self._ps,
            Action.SHELL: self._shell,
            Action.DB_SHELL: self._db_shell,
            Action.DB_RESET: self._db_reset,
            Action.DB_BACKUP: self._db_backup,
            Action.CLEAN: self._clean,
            Action.HEALTH: self._health,
            Action.PACKAGE: self._package,
        }

    def resolve(self, command: str, mode: str | None = None, service: str | None = None,
                args: tuple[str, ...] | list[str] = ()) -> Invocation:
        if command not in COMMANDS:
            raise UnknownCommandError(command)
        descriptor = COMMANDS[command]

        resolved_mode = descriptor.mode if descriptor.mode is not None else resolve_mode(mode)
        if descriptor.service is not None:
            service = descriptor.service
        elif not descriptor.scoped:
            service = None

        return Invocation(
            command=command,
            descriptor=descriptor,
            mode=resolved_mode,
            topology=topology_for(resolved_mode, self.config),
            service=service or None,
            args=tuple(args) if descriptor.passes_args else (),
        )

    async def dispatch(self, command: str, mode: str | None = None, service: str | None = None,
                       args: tuple[str, ...] | list[str] = ()) -> int:
        invocation = self.resolve(command, mode, service, args)
        descriptor = invocation.descriptor

        if descriptor.confirmation:
            confirm_destructive(self.confirmation, 'This will delete all data in the MongoDB database!')

        if descriptor.needs_credentials:
            credentials = read_credentials(self.config.env_file_path)
            require_credentials(credentials, descriptor.credentials, self.config.env_file_path)
            invocation = invocation._replace(credentials=credentials)

        return await self._handlers[descriptor.action](invocation)

    def compose(self, topology: str) -> ComposeShellInterface:
        return ComposeShellInterface(
            topology,
            self.relay,
            project_root=self.config.project_root,
            docker_binary=self.config.docker_binary,
        )

    async def _up(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_up(invocation.service, invocation.args)

    async def _down(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_down(invocation.service, invocation.args)

    async def _build(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_build(invocation.service, invocation.args)

    async def _restart(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_restart(invocation.service)

    async def _logs(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_logs(invocation.service)

    async def _ps(self, invocation: Invocation) -> int:
        return await self.compose(invocation.topology).dc_ps()

    async def _shell(self, invocation: Invocation) -> int:
        if not invocation.service:
            raise UsageError(
                f'Usage: stackpilot {invocation.command} SERVICE [--mode prod]',
                example=f'stackpilot {invocation.command} backend',
            )
        return await self.compose(invocation.topology).dc_exec(invocation.service, self.config.shell)

    def _mongo_auth(self, credentials: Credentials) -> list[str]:
        return [
            '-u', credentials.user,
            '-p', credentials.password,
            '--authenticationDatabase', self.config.authentication_database,
        ]

    async def _db_shell(self, invocation: Invocation) -> int:
        credentials = invocation.credentials
        return await self.compose(invocation.topology).dc_exec(
            invocation.service, 'mongosh', *self._mongo_auth(credentials), credentials.database,
        )

    async def _db_reset(self, invocation: Invocation) -> int:
        credentials = invocation.credentials
        return await self.compose(invocation.topology).dc_exec(
            invocation.service, 'mongosh', *self._mongo_auth(credentials), credentials.database,
            '--eval', 'db.dropDatabase()',
        )

    async def _db_backup(self, invocation: Invocation) -> int:
        credentials = invocation.credentials
        archive = f'{self.config.backup_directory}/{backup_archive_name(self.clock())}'

        CONSOLE.print(Text('Backing up database...', style=Style.info))
        returncode = await self.compose(invocation.topology).dc_exec(
            invocation.service, 'mongodump', *self._mongo_auth(credentials),
            '--db', credentials.database, f'--archive={archive}',
        )
        if returncode == 0:
            CONSOLE.print(
                Text('Backup created in ', style=Style.good)
                .append(Text(invocation.service, style=Style.mark))
                .append(Text(' container at ', style=Style.good))
                .append(Text(archive, style=Style.mark))
            )
        return returncode

    async def _clean(self, invocation: Invocation) -> int:
        for mode in Mode:
            topology = topology_for(mode, self.config)
            returncode = await self.compose(topology).dc_down(args=invocation.descriptor.flags, quiet=True)
            if returncode != 0:
                CONSOLE.print(Text(
                    f'Ignoring failed cleanup of {topology} (exit code {returncode})',
                    style=Style.suspicious
                ))
        return 0

    async def _health(self, invocation: Invocation) -> int:
        await HealthVerifier(
            self.config.health_host,
            invocation.credentials.port,
            timeout=self.config.health_timeout,
        ).verify()
        return 0

    async def _package(self, invocation: Invocation) -> int:
        return await self.relay.run(
            [self.config.npm_binary, *invocation.descriptor.flags],
            cwd=self.config.backend_directory,
        )
