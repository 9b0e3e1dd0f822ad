from enum import Enum
from enum import auto
from types import MappingProxyType
from typing import NamedTuple

from stackpilot.core.env_file import ALL_CREDENTIALS
from stackpilot.core.env_file import DATABASE_AUTH
from stackpilot.core.modes import Mode

BACKEND_SERVICE = 'backend'
GATEWAY_SERVICE = 'gateway'
DATABASE_SERVICE = 'mongodb'


class Action(Enum):
    UP = auto()
    DOWN = auto()
    BUILD = auto()
    RESTART = auto()
    LOGS = auto()
    PS = auto()
    SHELL = auto()
    DB_SHELL = auto()
    DB_RESET = auto()
    DB_BACKUP = auto()
    CLEAN = auto()
    HEALTH = auto()
    PACKAGE = auto()


class Group(Enum):
    CORE = 'Core Commands'
    DEV = 'Development Aliases'
    PROD = 'Production Aliases'
    BACKEND = 'Backend'
    DATABASE = 'Database'
    CLEANUP = 'Cleanup'
    UTILITIES = 'Utilities'


class CommandDescriptor(NamedTuple):
    action: Action
    help: str
    group: Group
    mode: Mode | None = None
    service: str | None = None
    flags: tuple[str, ...] = ()
    scoped: bool = True
    passes_args: bool = False
    credentials: tuple[str, ...] = ()
    confirmation: bool = False

    @property
    def uses_mode(self) -> bool:
        return self.mode is None and self.action not in (Action.PACKAGE, Action.CLEAN, Action.HEALTH)

    @property
    def uses_service(self) -> bool:
        return self.service is None and self.scoped

    @property
    def needs_credentials(self) -> bool:
        return bool(self.credentials)


def _lifecycle(group: Group, mode: Mode | None) -> dict[str, CommandDescriptor]:
    return {
        'up': CommandDescriptor(Action.UP, 'Start services', group, mode=mode, passes_args=True),
        'down': CommandDescriptor(Action.DOWN, 'Stop services', group, mode=mode, passes_args=True),
        'build': CommandDescriptor(Action.BUILD, 'Build containers', group, mode=mode, passes_args=True),
        'logs': CommandDescriptor(Action.LOGS, 'View logs', group, mode=mode),
        'restart': CommandDescriptor(Action.RESTART, 'Restart services', group, mode=mode),
    }


COMMANDS = MappingProxyType({
    **_lifecycle(Group.CORE, None),
    'shell': CommandDescriptor(Action.SHELL, 'Open shell in container', Group.CORE),
    'ps': CommandDescriptor(Action.PS, 'Show running containers', Group.CORE, scoped=False),

    **{f'dev-{name}': descriptor for name, descriptor in _lifecycle(Group.DEV, Mode.DEVELOPMENT).items()},
    'dev-shell': CommandDescriptor(
        Action.SHELL, 'Open shell in backend container', Group.DEV,
        mode=Mode.DEVELOPMENT, service=BACKEND_SERVICE,
    ),
    'backend-shell': CommandDescriptor(
        Action.SHELL, 'Open shell in backend container', Group.DEV,
        mode=Mode.DEVELOPMENT, service=BACKEND_SERVICE,
    ),
    'gateway-shell': CommandDescriptor(
        Action.SHELL, 'Open shell in gateway container', Group.DEV,
        mode=Mode.DEVELOPMENT, service=GATEWAY_SERVICE,
    ),
    'mongo-shell': CommandDescriptor(
        Action.DB_SHELL, 'Open MongoDB shell', Group.DEV,
        mode=Mode.DEVELOPMENT, service=DATABASE_SERVICE, credentials=DATABASE_AUTH,
    ),

    **{f'prod-{name}': descriptor for name, descriptor in _lifecycle(Group.PROD, Mode.PRODUCTION).items()},

    'backend-build': CommandDescriptor(
        Action.PACKAGE, 'Build backend TypeScript', Group.BACKEND, flags=('run', 'build'), scoped=False,
    ),
    'backend-install': CommandDescriptor(
        Action.PACKAGE, 'Install backend dependencies', Group.BACKEND, flags=('install',), scoped=False,
    ),
    'backend-type-check': CommandDescriptor(
        Action.PACKAGE, 'Type check backend code', Group.BACKEND, flags=('run', 'type-check'), scoped=False,
    ),
    'backend-dev': CommandDescriptor(
        Action.PACKAGE, 'Run backend in development mode (local, not Docker)', Group.BACKEND,
        flags=('run', 'dev'), scoped=False,
    ),

    'db-reset': CommandDescriptor(
        Action.DB_RESET, 'Reset MongoDB database (WARNING: deletes all data)', Group.DATABASE,
        service=DATABASE_SERVICE, credentials=ALL_CREDENTIALS, confirmation=True,
    ),
    'db-backup': CommandDescriptor(
        Action.DB_BACKUP, 'Backup MongoDB database', Group.DATABASE,
        service=DATABASE_SERVICE, credentials=ALL_CREDENTIALS,
    ),

    'clean': CommandDescriptor(
        Action.CLEAN, 'Remove containers and networks (both dev and prod)', Group.CLEANUP,
        flags=('--remove-orphans',), scoped=False,
    ),
    'clean-all': CommandDescriptor(
        Action.CLEAN, 'Remove containers, networks, volumes, and images', Group.CLEANUP,
        flags=('--remove-orphans', '--volumes', '--rmi', 'all'), scoped=False,
    ),
    'clean-volumes': CommandDescriptor(
        Action.CLEAN, 'Remove all volumes', Group.CLEANUP, flags=('--volumes',), scoped=False,
    ),

    'status': CommandDescriptor(Action.PS, 'Alias for ps', Group.UTILITIES, scoped=False),
    'health': CommandDescriptor(
        Action.HEALTH, 'Check service health', Group.UTILITIES, scoped=False, credentials=('port',),
    ),
})
