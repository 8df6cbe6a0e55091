"""Infrastructure observability module - error and notice reporting.

Exports:
    Monitor: Protocol for the monitor capability
    LoggingMonitor: Default monitor backed by structlog
"""

from infrastructure.observability.monitor import LoggingMonitor, Monitor

__all__ = [
    "LoggingMonitor",
    "Monitor",
]
