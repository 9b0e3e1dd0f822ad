from stackpilot.errors.base import StackpilotError


class HealthCheckError(StackpilotError):
    def __init__(self, stage, url: str, reason: str, status: int | None = None):
        self.stage = stage
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f'{stage.title} health check failed at {stage.label} stage ({url}: {reason})')
