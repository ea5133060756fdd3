"""Uniform result type for engine operations.

Namespace loads report one OperationResult per namespace instead of
raising, so callers can tell which fragments reached the translation tree
and which did not.
"""

from dataclasses import dataclass
from typing import Any, Optional

from localization.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one operation.

    Attributes:
        status: How the operation ended.
        message: Human-readable summary for logs.
        data: Payload of a successful operation, e.g. a translation fragment.
        error_code: Machine-readable reason of a failure, e.g.
            "namespace_load_timeout".
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True when loading again may succeed."""
        return self.status.is_retryable

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with an explicit status."""
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure worth retrying: a resolver raised or did not settle in time."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that repeats on every load: e.g. a resolver returning no mapping."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def from_exception(
        cls, error: BaseException, error_code: str, message: Optional[str] = None
    ) -> "OperationResult":
        """Transient failure describing an exception raised by an operation.

        Args:
            error: Exception raised by the operation.
            error_code: Machine-readable reason.
            message: Summary prefix; the exception text is appended.

        Returns:
            OperationResult with TRANSIENT_ERROR status.
        """
        text = f"{message}: {error}" if message else str(error)
        return cls.transient_error(text, error_code=error_code)
