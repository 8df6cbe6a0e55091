"""Operation result dataclass.

AWS client calls never raise for service errors; they return an
`OperationResult` and the caller decides what a failure means.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one call to an external service.

    Attributes:
        status: OperationStatus of the call
        message: human-readable summary for logs
        data: payload on success (queue url, message list, raw response)
        error_code: service error code on failure
        retry_after: seconds the service asked us to wait, when throttled
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True for failures that may succeed if the call is repeated."""
        return self.status is OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(OperationStatus.SUCCESS, message, data=data)

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Throttling, dropped connections, endpoint unavailable."""
        return cls(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code=error_code,
            retry_after=retry_after,
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Malformed requests, invalid parameters, stale receipt handles."""
        return cls(OperationStatus.PERMANENT_ERROR, message, error_code=error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls(OperationStatus.NOT_FOUND, message, error_code=error_code)

    @classmethod
    def unauthorized(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls(OperationStatus.UNAUTHORIZED, message, error_code=error_code)
