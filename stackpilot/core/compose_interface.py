from pathlib import Path

from stackpilot.core.relay import Relay


class ComposeShellInterface:
    def __init__(self, compose_file: str, relay: Relay, project_root: Path | str, docker_binary: str = 'docker'):
        self.compose_file = compose_file
        self.relay = relay
        self.project_root = project_root
        self.docker_binary = docker_binary

    def make_command(self, action: str, *params: str, service: str | None = None) -> list[str]:
        cmd = [self.docker_binary, 'compose', '-f', self.compose_file, action, *params]
        if service:
            cmd.append(service)
        return cmd

    async def run(self, action: str, *params: str, service: str | None = None, quiet: bool = False) -> int:
        return await self.relay.run(
            self.make_command(action, *params, service=service),
            cwd=self.project_root,
            quiet=quiet,
        )

    async def dc_up(self, service: str | None = None, args: tuple[str, ...] = ()) -> int:
        return await self.run('up', '-d', *args, service=service)

    async def dc_down(self, service: str | None = None, args: tuple[str, ...] = (), quiet: bool = False) -> int:
        return await self.run('down', *args, service=service, quiet=quiet)

    async def dc_build(self, service: str | None = None, args: tuple[str, ...] = ()) -> int:
        return await self.run('build', *args, service=service)

    async def dc_restart(self, service: str | None = None) -> int:
        return await self.run('restart', service=service)

    async def dc_logs(self, service: str | None = None) -> int:
        return await self.run('logs', '-f', service=service)

    async def dc_ps(self) -> int:
        return await self.run('ps')

    async def dc_exec(self, container: str, *cmd: str) -> int:
        return await self.run('exec', container, *cmd)
