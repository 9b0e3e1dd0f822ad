import vedro
from vedro import catched

from contexts.dispatcher import stubbed_dispatcher
from contexts.project import project_directory
from stackpilot.errors.commands import UsageError


class Scenario(vedro.Scenario):
    subject = 'open shell without service'

    @vedro.params(None)
    @vedro.params('')
    def __init__(self, service):
        self.service = service

    def given_dispatcher(self):
        self.dispatcher = stubbed_dispatcher(project_directory())

    async def when_user_opens_shell(self):
        with catched(Exception) as self.exception:
            await self.dispatcher.dispatch('shell', mode='prod', service=self.service)

    def then_it_should_raise_usage_error(self):
        assert self.exception.type is UsageError

    def and_it_should_show_example(self):
        assert 'stackpilot shell backend' in str(self.exception.value)

    def and_it_should_exit_non_zero(self):
        assert self.exception.value.exit_code != 0

    def and_it_should_not_relay_anything(self):
        assert self.dispatcher.relay.calls == []
