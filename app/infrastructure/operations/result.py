"""Operation result dataclass.

Uniform result type carrying status, payload and error information, so a
caller iterating over many operations can inspect each outcome and move on.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def not_found(
        cls, message: str, data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND result for a lookup that resolved nothing."""
        return cls.error(
            OperationStatus.NOT_FOUND, message, error_code="NOT_FOUND", data=data
        )

    @classmethod
    def locked(
        cls, message: str, data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a LOCKED result for an operation refused by a realm lock.

        Args:
            message: Human-friendly error message
            data: Optional payload, typically the id of the locked resource

        Returns:
            OperationResult with LOCKED status and GROUP_LOCKED error code
        """
        return cls.error(
            OperationStatus.LOCKED, message, error_code="GROUP_LOCKED", data=data
        )
