"""Shared fixtures for the notification bridge test suite."""

import threading
import time
from typing import Any, List, Optional

import pytest

from modules.notify.models import QueueItem


class RecordingMonitor:
    """Monitor that keeps every report for assertions."""

    def __init__(self):
        self.errors: List[tuple] = []
        self.notices: List[Any] = []

    def report_error(self, error, context=None):
        self.errors.append((error, context))

    def notice(self, message):
        self.notices.append(message)


class FakeSession:
    """In-memory chat session recording joins and sends.

    `send_error` / `join_error` are raised from the matching call when set.
    """

    def __init__(self, join_result: bool = True):
        self.join_result = join_result
        self.join_error: Optional[Exception] = None
        self.send_error: Optional[Exception] = None
        self.calls: List[tuple] = []

    @property
    def joins(self) -> List[str]:
        return [args[0] for name, *args in self.calls if name == "join_channel"]

    @property
    def sends(self) -> List[tuple]:
        return [tuple(args) for name, *args in self.calls if name == "send"]

    def connect(self):
        self.calls.append(("connect",))

    def join_channel(self, name):
        self.calls.append(("join_channel", name))
        if self.join_error is not None:
            raise self.join_error
        return self.join_result

    def send(self, target, message):
        self.calls.append(("send", target, message))
        if self.send_error is not None:
            raise self.send_error

    def mark_draining(self):
        self.calls.append(("mark_draining",))

    def disconnect(self):
        self.calls.append(("disconnect",))


class FakeQueue:
    """Queue that serves pre-loaded batches.

    Once the batches run out it returns empty batches and, when given a
    `stop_event`, sets it so a consumer loop ends.
    """

    def __init__(self, batches=None, stop_event: Optional[threading.Event] = None):
        self.batches = list(batches or [])
        self.stop_event = stop_event
        self.deleted: List[QueueItem] = []
        self.receive_calls = 0
        self.receive_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.resolve_error: Optional[Exception] = None

    def resolve(self):
        if self.resolve_error is not None:
            raise self.resolve_error
        return "https://sqs.ca-central-1.amazonaws.com/123456789012/irc"

    def receive_batch(self):
        self.receive_calls += 1
        if self.receive_error is not None:
            raise self.receive_error
        if self.batches:
            return self.batches.pop(0)
        if self.stop_event is not None:
            self.stop_event.set()
        else:
            # stand-in for the long-poll wait
            time.sleep(0.01)
        return []

    def delete(self, item):
        if self.delete_error is not None:
            raise self.delete_error
        self.deleted.append(item)


@pytest.fixture
def recording_monitor():
    return RecordingMonitor()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def make_fake_queue():
    """Factory fixture for FakeQueue instances."""

    def _factory(batches=None, stop_event=None) -> FakeQueue:
        return FakeQueue(batches=batches, stop_event=stop_event)

    return _factory


@pytest.fixture
def queue_item_factory():
    """Factory for QueueItem instances."""
    counter = {"n": 0}

    def _factory(
        body: str = '{"channel": "#ops", "message": "hello"}',
        attempt_count: int = 1,
        message_id: Optional[str] = None,
    ) -> QueueItem:
        counter["n"] += 1
        return QueueItem(
            message_id=message_id or f"msg-{counter['n']}",
            receipt_handle=f"receipt-{counter['n']}",
            body=body,
            attempt_count=attempt_count,
        )

    return _factory
