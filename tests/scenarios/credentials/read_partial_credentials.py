import vedro

from contexts.project import env_file
from contexts.project import project_directory
from stackpilot import Credentials
from stackpilot import read_credentials


class Scenario(vedro.Scenario):
    subject = 'read credentials from env file with {content!r}'

    @vedro.params('', Credentials())
    @vedro.params('NODE_ENV=development\n', Credentials())
    @vedro.params('GATEWAY_PORT=8080\n', Credentials(port='8080'))
    @vedro.params('MONGO_DATABASE=shop', Credentials(database='shop'))
    @vedro.params('MONGO_INITDB_ROOT_USERNAME=\n', Credentials())
    def __init__(self, content, expected):
        self.content = content
        self.expected = expected

    def given_env_file(self):
        self.env_file = env_file(project_directory(), self.content)

    def when_user_reads_credentials(self):
        self.credentials = read_credentials(self.env_file)

    def then_present_keys_should_be_read_and_absent_keys_empty(self):
        assert self.credentials == self.expected
