import vedro

from contexts.cli import fake_docker
from contexts.cli import recorded_docker_args
from contexts.cli import run_cli
from contexts.project import full_credentials
from contexts.project import project_directory


class Scenario(vedro.Scenario):
    subject = 'cli db-reset declined with {answer!r} exits silently'

    @vedro.params('n\n')
    @vedro.params('\n')
    @vedro.params('Y\n')
    def __init__(self, answer):
        self.answer = answer

    def given_project_with_credentials(self):
        self.project = project_directory()
        full_credentials(self.project)
        fake_docker(self.project)

    def when_user_declines_reset(self):
        self.result = run_cli(self.project, 'db-reset', input=self.answer)

    def then_it_should_exit_with_code_1(self):
        assert self.result.returncode == 1, self.result.stderr

    def and_it_should_not_print_error(self):
        assert 'Error' not in self.result.stderr

    def and_it_should_warn_before_asking(self):
        assert 'WARNING' in self.result.stdout

    def and_it_should_not_run_docker(self):
        assert recorded_docker_args(self.project) is None
