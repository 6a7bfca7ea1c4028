import pytest
from interfaces import ILogger


class RecordingLogger(ILogger):
    def __init__(self) -> None:
        self.records = []

    def log_information(self, message: str) -> None:
        self.records.append(('info', message))

    def log_error(self, message: str) -> None:
        self.records.append(('error', message))

    def messages(self, level: str):
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture
def recorder():
    return RecordingLogger()
