"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.notify import NotifyQueueSettings

__all__ = [
    "NotifyQueueSettings",
]
