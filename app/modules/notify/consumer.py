"""Queue consumer loop.

Receives batches from the notification queue and hands each item to the
dispatcher. An item is deleted once it is delivered or discarded. A failed
item is left on the queue so it becomes visible again after the visibility
timeout, until its receive count reaches MAX_RETRIES; then it is deleted
so a poisoned message cannot cycle forever.
"""

import threading
from typing import Dict, List, Optional, Protocol

from infrastructure.logging import bind_delivery_context, get_module_logger
from infrastructure.observability import Monitor
from modules.notify.dispatcher import DeliveryDispatcher, DeliveryOutcome
from modules.notify.models import QueueItem

logger = get_module_logger()

MAX_RETRIES = 5


class ItemQueue(Protocol):
    """The queue operations the consumer relies on."""

    def receive_batch(self) -> List[QueueItem]: ...

    def delete(self, item: QueueItem) -> None: ...


class QueueConsumer:
    """Drains the queue until stopped.

    The stop flag is checked between batches only: a batch that has been
    received is always processed to the end.

    Args:
        queue: Source of queue items
        dispatcher: Delivers decoded notifications
        monitor: Receives one report per failed delivery
        stop_event: Optional event that ends the loop when set
        max_retries: Receive count at which a failing item is dropped
    """

    def __init__(
        self,
        queue: ItemQueue,
        dispatcher: DeliveryDispatcher,
        monitor: Monitor,
        stop_event: Optional[threading.Event] = None,
        max_retries: int = MAX_RETRIES,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.queue = queue
        self.dispatcher = dispatcher
        self.monitor = monitor
        self.stop_event = stop_event or threading.Event()
        self.max_retries = max_retries

    def run(self) -> None:
        """Poll until the stop event is set.

        Queue service errors propagate and end the loop.
        """
        logger.info("queue_consumer_started", max_retries=self.max_retries)
        while not self.stop_event.is_set():
            self.process_batch()
        logger.info("queue_consumer_stopped")

    def stop(self) -> None:
        self.stop_event.set()

    def process_batch(self) -> Dict[str, int]:
        """Receive one batch and process every item in it.

        Returns:
            Counts of received items and of each per-item outcome.
        """
        items = self.queue.receive_batch()
        stats = {
            "received": len(items),
            "delivered": 0,
            "discarded": 0,
            "deferred": 0,
            "abandoned": 0,
        }
        if not items:
            logger.debug("no_messages_received")
            return stats

        logger.info("messages_received", count=len(items))
        for item in items:
            with bind_delivery_context(
                message_id=item.message_id, attempt_count=item.attempt_count
            ):
                stats[self._process_item(item)] += 1

        logger.info("batch_processed", **stats)
        return stats

    def _process_item(self, item: QueueItem) -> str:
        try:
            notification = item.decode()
            outcome = self.dispatcher.dispatch(notification)
        except Exception as e:  # pylint: disable=broad-except
            return self._handle_failure(item, e)

        self.queue.delete(item)
        if outcome is DeliveryOutcome.DELIVERED:
            logger.info("notification_delivered")
        return outcome.value

    def _handle_failure(self, item: QueueItem, error: Exception) -> str:
        logger.warning(
            "notification_delivery_failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self.monitor.report_error(
            error,
            {"message_id": item.message_id, "attempt_count": item.attempt_count},
        )
        if item.attempt_count < self.max_retries:
            logger.info("notification_left_for_redelivery")
            return "deferred"

        self.queue.delete(item)
        logger.warning("notification_abandoned", max_retries=self.max_retries)
        return "abandoned"
