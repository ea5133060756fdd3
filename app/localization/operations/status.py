"""Outcome classification for engine operations."""

from enum import Enum


class OperationStatus(Enum):
    """How an operation such as a single namespace fetch ended.

    Attributes:
        SUCCESS: The operation produced its data
        TRANSIENT_ERROR: The operation failed but may succeed on the next load
        PERMANENT_ERROR: Repeating the operation will fail the same way
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"

    @property
    def is_retryable(self) -> bool:
        return self is OperationStatus.TRANSIENT_ERROR
