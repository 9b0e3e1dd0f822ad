from stackpilot.core.commands import COMMANDS
from stackpilot.core.commands import CommandDescriptor
from stackpilot.core.config import Config
from stackpilot.core.dispatcher import CommandDispatcher
from stackpilot.core.env_file import Credentials
from stackpilot.core.env_file import read_credentials
from stackpilot.core.health import HealthStage
from stackpilot.core.health import HealthVerifier
from stackpilot.core.modes import Mode
from stackpilot.core.modes import resolve_mode
from stackpilot.core.modes import resolve_topology
from stackpilot.version import get_version

__version__ = get_version()
__all__ = (
    'COMMANDS', 'CommandDescriptor', 'CommandDispatcher', 'Config',
    'Credentials', 'read_credentials', 'HealthStage', 'HealthVerifier',
    'Mode', 'resolve_mode', 'resolve_topology',
)
