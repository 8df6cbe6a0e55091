"""Bridge lifecycle: connect, drain the queue, shut down."""

import threading
from typing import Optional, Protocol

from infrastructure.logging import get_module_logger
from infrastructure.observability import Monitor
from modules.notify.consumer import MAX_RETRIES, QueueConsumer
from modules.notify.dispatcher import ChatSession, DeliveryDispatcher
from modules.notify.queue import NotificationQueue

logger = get_module_logger()


class BridgeSession(ChatSession, Protocol):
    """The full session surface the bridge drives."""

    def connect(self) -> None: ...

    def mark_draining(self) -> None: ...

    def disconnect(self) -> None: ...


class NotificationBridge:
    """Delivers queued notifications to IRC until terminated.

    `start` connects the session, resolves the queue, and launches the
    consumer thread. `terminate` lets the current batch finish, then
    disconnects. A queue failure that ended the consumer early is reported
    when it happens and re-raised from `terminate`.
    """

    def __init__(
        self,
        session: BridgeSession,
        queue: NotificationQueue,
        monitor: Monitor,
        dispatcher: Optional[DeliveryDispatcher] = None,
        max_retries: int = MAX_RETRIES,
    ) -> None:
        self._session = session
        self._queue = queue
        self._monitor = monitor
        self._dispatcher = dispatcher or DeliveryDispatcher(session)
        self._max_retries = max_retries
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[Exception] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def error(self) -> Optional[Exception]:
        """The error that stopped the consumer, if any."""
        return self._error

    def start(self) -> None:
        """Connect and begin consuming.

        Raises:
            IrcConnectionError: The IRC connection could not be established.
            QueueServiceError: The queue could not be resolved. The session
                is disconnected before the error propagates.
        """
        if self._thread is not None:
            raise RuntimeError("bridge already started")

        logger.info("bridge_starting")
        self._session.connect()
        try:
            queue_url = self._queue.resolve()
        except Exception:
            self._session.disconnect()
            raise

        consumer = QueueConsumer(
            self._queue,
            self._dispatcher,
            self._monitor,
            stop_event=self._stop_event,
            max_retries=self._max_retries,
        )
        self._thread = threading.Thread(
            target=self._run_consumer,
            args=(consumer,),
            daemon=True,
            name="notify-queue-consumer",
        )
        self._thread.start()
        logger.info("bridge_started", queue_url=queue_url)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the consumer stops or the timeout passes.

        Returns:
            True if the consumer is no longer running.
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def terminate(self) -> None:
        """Stop after the in-flight batch, then disconnect from IRC."""
        logger.info("bridge_terminating")
        self._stop_event.set()
        self._session.mark_draining()
        if self._thread is not None:
            self._thread.join()
        self._session.disconnect()
        logger.info("bridge_terminated")
        if self._error is not None:
            raise self._error

    def _run_consumer(self, consumer: QueueConsumer) -> None:
        try:
            consumer.run()
        except Exception as e:  # pylint: disable=broad-except
            self._error = e
            logger.error("queue_consumer_failed", error=str(e), exc_info=True)
            self._monitor.report_error(e, {"source": "queue_consumer"})
