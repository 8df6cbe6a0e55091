"""Infrastructure modules for the IRC notification bridge.

Centralized infrastructure components:
- configuration: Settings management (settings)
- logging: Structured logging (get_module_logger, configure_logging)
- observability: Error and notice reporting (Monitor, LoggingMonitor)
- operations: Operation results (OperationResult, OperationStatus)
- clients: AWS SQS and IRC protocol clients
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Observability
from infrastructure.observability import LoggingMonitor, Monitor

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Observability
    "LoggingMonitor",
    "Monitor",
    # Operations
    "OperationResult",
    "OperationStatus",
]
