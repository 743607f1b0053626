"""Shared test fixtures."""

import pytest


class RecordingSink:
    """Structural sink with only ``log``."""

    def __init__(self):
        self.messages = []

    def log(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def recording_sink():
    """Sink that keeps every logged message in order."""
    return RecordingSink()
