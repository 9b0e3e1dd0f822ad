import os
from pathlib import Path
from typing import Mapping


class Config:
    def __init__(self, environ: Mapping[str, str] | None = None):
        if environ is None:
            environ = os.environ
        self.project_root: Path = Path(environ.get('STACKPILOT_PROJECT_ROOT', '.'))
        self.dev_compose_file: str = environ.get('STACKPILOT_DEV_COMPOSE_FILE', 'docker/compose.development.yaml')
        self.prod_compose_file: str = environ.get('STACKPILOT_PROD_COMPOSE_FILE', 'docker/compose.production.yaml')
        self.env_file_path: Path = self.project_root / environ.get('STACKPILOT_ENV_FILE', '.env')
        self.docker_binary: str = environ.get('STACKPILOT_DOCKER_BINARY', 'docker')
        self.npm_binary: str = environ.get('STACKPILOT_NPM_BINARY', 'npm')
        self.backend_directory: Path = self.project_root / environ.get('STACKPILOT_BACKEND_DIRECTORY', 'backend')
        self.health_host: str = environ.get('STACKPILOT_HEALTH_HOST', 'localhost')
        self.health_timeout: float = float(environ.get('STACKPILOT_HEALTH_TIMEOUT', 10))
        self.debug_commands = bool(environ.get('STACKPILOT_DEBUG_COMMANDS', False))

        self.authentication_database = 'admin'
        self.backup_directory = '/backup'
        self.shell = '/bin/sh'
