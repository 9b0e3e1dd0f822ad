import os
import subprocess
import sys
from pathlib import Path

FAKE_DOCKER = '''#!/bin/sh
printf '%s\\n' "$@" > "{args_file}"
exit {returncode}
'''


def fake_docker(root: Path, returncode: int = 0) -> Path:
    binary = root / 'docker'
    binary.write_text(FAKE_DOCKER.format(args_file=root / 'docker.args', returncode=returncode))
    binary.chmod(0o755)
    return binary


def recorded_docker_args(root: Path) -> list[str] | None:
    args_file = root / 'docker.args'
    if not args_file.exists():
        return None
    return args_file.read_text().splitlines()


def run_cli(root: Path, *argv: str, env: dict[str, str] | None = None,
            input: str = '') -> subprocess.CompletedProcess:
    cli_env = {
        key: value for key, value in os.environ.items()
        if key not in ('MODE', 'SERVICE', 'ARGS')
    }
    cli_env |= {
        'STACKPILOT_PROJECT_ROOT': str(root),
        'STACKPILOT_DOCKER_BINARY': str(root / 'docker'),
        'NO_COLOR': '1',
    }
    if env is not None:
        cli_env |= env
    return subprocess.run(
        [sys.executable, '-m', 'stackpilot', *argv],
        cwd=root,
        env=cli_env,
        input=input,
        capture_output=True,
        text=True,
        timeout=60,
    )
