"""Notification queue backed by SQS.

Adapts `SqsClient`'s OperationResult API to the consumer loop: results
become `QueueItem` lists, and any unsuccessful call raises
`QueueServiceError`.
"""

from dataclasses import dataclass
from typing import List, Optional

from infrastructure.clients.aws.sqs import SqsClient
from infrastructure.logging import get_module_logger
from modules.notify.errors import QueueServiceError
from modules.notify.models import QueueItem

logger = get_module_logger()


@dataclass
class PollConfig:
    """Receive parameters for one poll.

    Attributes:
        max_number_of_messages: Messages requested per poll (SQS allows 1-10)
        wait_time_seconds: Long-poll wait (SQS allows 0-20)
        visibility_timeout: Seconds a received message stays hidden; an
            undeleted message becomes receivable again after this window
    """

    max_number_of_messages: int = 10
    wait_time_seconds: int = 20
    visibility_timeout: int = 30

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 1 <= self.max_number_of_messages <= 10:
            raise ValueError("max_number_of_messages must be between 1 and 10")
        if not 0 <= self.wait_time_seconds <= 20:
            raise ValueError("wait_time_seconds must be between 0 and 20")
        if self.visibility_timeout < 0:
            raise ValueError("visibility_timeout must not be negative")


class NotificationQueue:
    """The queue the bridge drains.

    Args:
        sqs: SqsClient used for all calls
        queue_name: Name of the queue; created if it does not exist
        poll_config: Optional PollConfig. If not provided, uses defaults.
    """

    def __init__(
        self,
        sqs: SqsClient,
        queue_name: str,
        poll_config: Optional[PollConfig] = None,
    ) -> None:
        if not queue_name:
            raise ValueError("queue_name is required")
        self._sqs = sqs
        self.queue_name = queue_name
        self.poll_config = poll_config or PollConfig()
        self._queue_url: Optional[str] = None
        self.log = logger.bind(queue_name=queue_name)

    @property
    def queue_url(self) -> str:
        if self._queue_url is None:
            raise QueueServiceError(f"queue {self.queue_name} has not been resolved")
        return self._queue_url

    def resolve(self) -> str:
        """Create or look up the queue and remember its URL."""
        result = self._sqs.create_queue(self.queue_name)
        if not result.is_success:
            raise QueueServiceError(
                f"could not resolve queue {self.queue_name}: {result.message}", result
            )
        self._queue_url = result.data
        self.log.info("queue_resolved", queue_url=self._queue_url)
        return self._queue_url

    def receive_batch(self) -> List[QueueItem]:
        """Long-poll one batch of messages."""
        config = self.poll_config
        result = self._sqs.receive_messages(
            self.queue_url,
            max_number_of_messages=config.max_number_of_messages,
            wait_time_seconds=config.wait_time_seconds,
            visibility_timeout=config.visibility_timeout,
        )
        if not result.is_success:
            raise QueueServiceError(
                f"could not receive from {self.queue_name}: {result.message}", result
            )
        return [QueueItem.from_sqs_message(message) for message in result.data]

    def delete(self, item: QueueItem) -> None:
        """Delete a message by its receipt handle."""
        result = self._sqs.delete_message(self.queue_url, item.receipt_handle)
        if not result.is_success:
            raise QueueServiceError(
                f"could not delete message {item.message_id}: {result.message}",
                result,
            )
