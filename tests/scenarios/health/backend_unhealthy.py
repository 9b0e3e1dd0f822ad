import vedro
from vedro import catched

from contexts.dispatcher import stubbed_dispatcher
from contexts.health_server import health_server
from contexts.project import full_credentials
from contexts.project import project_directory
from stackpilot import HealthStage
from stackpilot.errors.health import HealthCheckError


class Scenario(vedro.Scenario):
    subject = 'backend behind healthy gateway answers 502'

    async def given_healthy_gateway_and_broken_backend(self):
        self.server = await health_server(gateway_status=200, backend_status=502)

    def given_env_file_with_gateway_port(self):
        self.project = project_directory()
        full_credentials(self.project, port=self.server.port)

    def given_dispatcher(self):
        self.dispatcher = stubbed_dispatcher(self.project)

    async def when_user_checks_health(self):
        with catched(Exception) as self.exception:
            await self.dispatcher.dispatch('health')

    def then_it_should_fail_on_upstream_stage(self):
        assert self.exception.type is HealthCheckError
        assert self.exception.value.stage is HealthStage.UPSTREAM

    def and_it_should_name_backend(self):
        assert 'Backend health check failed' in str(self.exception.value)
        assert self.exception.value.url.endswith('/api/health')

    def and_it_should_carry_backend_status(self):
        assert self.exception.value.status == 502

    def and_it_should_check_gateway_first(self):
        assert self.server.hits == ['/health', '/api/health']
