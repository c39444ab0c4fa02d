"""Shared fixtures."""

import pytest

from roombot.domain.models import RoomIdentifier
from roombot.domain.tracker import PostedMessageTracker


class RecordingLogger:
    """LoggerPort that keeps every entry for assertions."""

    def __init__(self):
        self.entries = []

    def log(self, level, message, context=None):
        self.entries.append((level, message, context))

    def messages(self, level=None):
        return [m for lvl, m, _ in self.entries if level is None or lvl == level]


class FakeTransport:
    """TransportPort returning queued responses; exceptions in the queue are raised."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []

    async def request(self, request):
        self.requests.append(request)
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeSleep:
    """Records requested delays instead of waiting."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def room():
    return RoomIdentifier(room_id=11, host="https://chat.stackoverflow.com")


@pytest.fixture
def other_room():
    return RoomIdentifier(room_id=100286, host="https://chat.stackoverflow.com")


@pytest.fixture
def tracker():
    return PostedMessageTracker()


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def make_transport():
    return FakeTransport
