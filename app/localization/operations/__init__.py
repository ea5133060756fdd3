"""Operation result types and status enums."""

from localization.operations.result import OperationResult
from localization.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
