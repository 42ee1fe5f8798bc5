"""
Pytest configuration and shared fixtures for tests
"""

import pytest

from service_center.config import reset_config
from service_center.models import Client
from service_center.notifications import NotificationChannel
from service_center.registry import AppointmentRegistry


class RecordingChannel(NotificationChannel):
    """Notification channel that keeps messages instead of printing them"""

    def __init__(self):
        self.sent = []

    def send(self, recipient: str, message: str) -> None:
        self.sent.append((recipient, message))


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default configuration"""
    for name in (
        "SERVICE_CENTER_CENTER_NAME",
        "SERVICE_CENTER_LOG_LEVEL",
        "SERVICE_CENTER_STRICT_DATES",
        "SERVICE_CENTER_CURRENCY_SYMBOL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(name="registry")
def registry_fixture():
    """Empty appointment registry"""
    return AppointmentRegistry()


@pytest.fixture(name="channel")
def channel_fixture():
    """Channel that records notifications for inspection"""
    return RecordingChannel()


@pytest.fixture(name="alice")
def alice_fixture(channel):
    """Client whose notifications are recorded"""
    return Client(name="Alice", contact="555-0100", channel=channel)


@pytest.fixture(name="scripted_input")
def scripted_input_fixture():
    """Build a prompt function that replays answers, then signals end of input"""

    def factory(*answers):
        remaining = list(answers)
        asked = []

        def prompt(question: str) -> str:
            asked.append(question)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        prompt.asked = asked
        return prompt

    return factory
