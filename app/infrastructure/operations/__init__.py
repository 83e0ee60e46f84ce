"""Operation result types and status enums.

Standardized result types returned by operations that report an outcome
instead of raising, such as a single group deletion attempt.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
