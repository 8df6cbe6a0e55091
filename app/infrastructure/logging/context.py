"""Delivery context binding for structured logging.

Binds queue-message metadata to structlog context variables so every log
line emitted while one notification is being delivered carries the same
message id and attempt count.

Usage:
    from infrastructure.logging import bind_delivery_context

    with bind_delivery_context(message_id="abc", attempt_count=2):
        logger.info("delivering_notification")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_delivery_context(
    message_id: Optional[str] = None,
    attempt_count: Optional[int] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind delivery-scoped context to all logs within the context manager.

    Args:
        message_id: Queue message identifier.
        attempt_count: Approximate number of times the message was received.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    if message_id is not None:
        context["message_id"] = message_id

    if attempt_count is not None:
        context["attempt_count"] = attempt_count

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
