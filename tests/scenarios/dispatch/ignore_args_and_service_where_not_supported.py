import vedro

from config import Config
from contexts.dispatcher import stubbed_dispatcher
from contexts.project import project_directory


class Scenario(vedro.Scenario):
    subject = '{command} drops unsupported selectors'

    @vedro.params('logs', ['logs', '-f', 'backend'])
    @vedro.params('restart', ['restart', 'backend'])
    @vedro.params('ps', ['ps'])
    @vedro.params('status', ['ps'])
    def __init__(self, command, expected_action):
        self.command = command
        self.expected_action = expected_action

    def given_dispatcher(self):
        self.dispatcher = stubbed_dispatcher(project_directory())

    async def when_user_runs_command(self):
        await self.dispatcher.dispatch(self.command, service='backend', args=['--volumes'])

    def then_it_should_relay_without_args(self):
        assert [call.argv for call in self.dispatcher.relay.calls] == [
            ['docker', 'compose', '-f', Config.DEV_COMPOSE, *self.expected_action],
        ]
