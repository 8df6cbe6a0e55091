"""Errors for the notify module."""

from typing import Any


class NotifyBridgeError(Exception):
    """Base class for notification bridge errors."""


class QueueServiceError(NotifyBridgeError):
    """Raised when the queue service cannot be reached or rejects a call.

    Attributes:
        result: the OperationResult returned by the SQS client, if any
    """

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result


class NotificationDecodeError(NotifyBridgeError):
    """Raised when a queue message body is not a valid notification."""
