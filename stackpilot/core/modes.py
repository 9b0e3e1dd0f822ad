from enum import Enum

from stackpilot.core.config import Config


class Mode(Enum):
    DEVELOPMENT = 'dev'
    PRODUCTION = 'prod'


DEFAULT_MODE = Mode.DEVELOPMENT


def resolve_mode(selector: str | None) -> Mode:
    # Anything that is not literally "prod" is development, typos included.
    if selector == Mode.PRODUCTION.value:
        return Mode.PRODUCTION
    return Mode.DEVELOPMENT


def topology_for(mode: Mode, config: Config) -> str:
    if mode is Mode.PRODUCTION:
        return config.prod_compose_file
    return config.dev_compose_file


def resolve_topology(selector: str | None, config: Config) -> str:
    return topology_for(resolve_mode(selector), config)
