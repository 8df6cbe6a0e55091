"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of calls
to external services (the queue service in particular) so callers can tell
retryable failures from permanent ones.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, throttling)
        PERMANENT_ERROR: Non-retryable error (validation, bad request)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Resource not found (e.g. queue does not exist)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
