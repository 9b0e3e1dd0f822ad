"""
Two-stage health check of the running stack.

The gateway is probed first on its own `/health`, then the backend is probed
through the gateway via `/api/health`. A backend failure is therefore only
reported once the gateway itself is known to answer.
"""
import asyncio
from enum import Enum
from typing import NamedTuple

import aiohttp
from rich.text import Text

from stackpilot.errors.health import HealthCheckError
from stackpilot.output.console import CONSOLE
from stackpilot.output.styles import Style


class HealthStage(Enum):
    EDGE = ('edge', 'Gateway', '/health', 'gateway')
    UPSTREAM = ('upstream', 'Backend', '/api/health', 'backend health via gateway')

    def __init__(self, label: str, title: str, path: str, description: str):
        self.label = label
        self.title = title
        self.path = path
        self.description = description


class ProbeResult(NamedTuple):
    ok: bool
    reason: str = ''
    status: int | None = None


PROBE_OK = ProbeResult(ok=True)


class HealthVerifier:
    def __init__(self, host: str, port: str | int, timeout: float = 10):
        self._base_url = f'http://{host}:{port}'
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def url(self, stage: HealthStage) -> str:
        return f'{self._base_url}{stage.path}'

    async def probe(self, session: aiohttp.ClientSession, stage: HealthStage) -> ProbeResult:
        try:
            async with session.get(self.url(stage)) as response:
                if not response.ok:
                    return ProbeResult(ok=False, reason=f'HTTP {response.status}', status=response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return ProbeResult(ok=False, reason=str(e) or type(e).__name__)
        return PROBE_OK

    async def verify(self) -> None:
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            for stage in HealthStage:
                CONSOLE.print(Text(f'Checking {stage.description}...', style=Style.info))

                result = await self.probe(session, stage)
                if not result.ok:
                    raise HealthCheckError(stage, self.url(stage), result.reason, status=result.status)

                CONSOLE.print(Text(f' ✔ {stage.title} is healthy', style=Style.good))

        CONSOLE.print(Text('All services are healthy!', style=Style.good))
