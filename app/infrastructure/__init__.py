"""Infrastructure components shared by the tools.

- events: in-process event dispatcher
- operations: operation results and statuses
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
