"""Monitor capability for errors and unsolicited events.

The bridge reports delivery failures, protocol error events and unhandled
server messages through a `Monitor`. Any object with `report_error` and
`notice` satisfies the protocol; `LoggingMonitor` is the default and
writes both as structured log events.
"""

from typing import Any, Optional, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger()


@runtime_checkable
class Monitor(Protocol):
    """Fire-and-forget sink for errors and notices."""

    def report_error(
        self, error: BaseException, context: Optional[dict[str, Any]] = None
    ) -> None:
        """Report an error along with its context."""
        ...

    def notice(self, message: Any) -> None:
        """Record an unsolicited, non-error event."""
        ...


class LoggingMonitor:
    """Monitor that emits structlog events.

    Errors are logged at error level with the exception type and message;
    notices are logged at info level.
    """

    def __init__(self, component: str = "monitor") -> None:
        self.log = logger.bind(component=component)

    def report_error(
        self, error: BaseException, context: Optional[dict[str, Any]] = None
    ) -> None:
        self.log.error(
            "error_reported",
            error=str(error),
            error_type=type(error).__name__,
            context=context or {},
        )

    def notice(self, message: Any) -> None:
        self.log.info("notice", notice=message)
