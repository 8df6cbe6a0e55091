"""Notification queue feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class NotifyQueueSettings(FeatureSettings):
    """Notification queue polling configuration.

    Environment Variables:
        NOTIFY_QUEUE_NAME: Name of the SQS queue holding IRC notifications
        NOTIFY_POLL_BATCH_SIZE: Messages requested per poll (default: 10, max 10)
        NOTIFY_POLL_WAIT_SECONDS: Long-poll wait per receive (default: 20, max 20)
        NOTIFY_VISIBILITY_TIMEOUT_SECONDS: Seconds a received message stays
            hidden from other consumers (default: 30)

    Example:
        ```python
        from infrastructure.configuration import settings

        queue_name = settings.notify.NOTIFY_QUEUE_NAME
        ```
    """

    NOTIFY_QUEUE_NAME: str = Field(default="", alias="NOTIFY_QUEUE_NAME")
    NOTIFY_POLL_BATCH_SIZE: int = Field(default=10, alias="NOTIFY_POLL_BATCH_SIZE")
    NOTIFY_POLL_WAIT_SECONDS: int = Field(default=20, alias="NOTIFY_POLL_WAIT_SECONDS")
    NOTIFY_VISIBILITY_TIMEOUT_SECONDS: int = Field(
        default=30, alias="NOTIFY_VISIBILITY_TIMEOUT_SECONDS"
    )
