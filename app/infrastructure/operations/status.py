"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: Resource not found
        LOCKED: Resource is lock-protected by the host realm
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    LOCKED = "locked"
