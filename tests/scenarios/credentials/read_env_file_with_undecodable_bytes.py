import vedro

from contexts.project import project_directory
from stackpilot import read_credentials


class Scenario(vedro.Scenario):
    subject = 'read credentials from env file with non utf-8 bytes'

    def given_latin1_encoded_env_file(self):
        self.env_file = project_directory() / '.env'
        self.env_file.write_bytes(b'MONGO_INITDB_ROOT_PASSWORD=p\xe4ss\nGATEWAY_PORT=8080\n')

    def when_user_reads_credentials(self):
        self.credentials = read_credentials(self.env_file)

    def then_other_keys_should_still_be_read(self):
        assert self.credentials.port == '8080'

    def and_undecodable_value_should_not_be_empty(self):
        assert self.credentials.password.startswith('p')
        assert self.credentials.password.endswith('ss')
