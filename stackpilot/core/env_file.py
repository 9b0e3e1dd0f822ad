"""
Credentials lookup in the project `.env` file.

The file is scanned the same naive way the compose stack itself is configured:
for every key the first line *starting* with the key name wins, the value is
everything after the first `=`, stripped. Quotes, escapes, comments and
multi-line values are not understood. A line like `MONGO_DATABASE_URL=...`
placed before `MONGO_DATABASE=...` shadows it.
"""
from dataclasses import dataclass
from dataclasses import fields
from pathlib import Path

SEPARATOR = '='


@dataclass(frozen=True)
class Credentials:
    user: str = ''
    password: str = ''
    database: str = ''
    port: str = ''

    def missing(self, required: tuple[str, ...]) -> list[str]:
        return [ENV_KEYS[name] for name in required if not getattr(self, name)]


ENV_KEYS = {
    'user': 'MONGO_INITDB_ROOT_USERNAME',
    'password': 'MONGO_INITDB_ROOT_PASSWORD',
    'database': 'MONGO_DATABASE',
    'port': 'GATEWAY_PORT',
}

ALL_CREDENTIALS = tuple(field.name for field in fields(Credentials))
DATABASE_AUTH = ('user', 'password', 'database')


def extract_value(lines: list[str], key: str) -> str:
    for line in lines:
        if line.startswith(key):
            _, _, value = line.partition(SEPARATOR)
            return value.strip()
    return ''


def read_credentials(env_file: str | Path) -> Credentials:
    env_file = Path(env_file)
    if not env_file.is_file():
        return Credentials()

    # undecodable bytes must not stop the scan for the other keys
    lines = env_file.read_text(encoding='utf-8', errors='replace').splitlines()
    return Credentials(**{
        name: extract_value(lines, key)
        for name, key in ENV_KEYS.items()
    })
