"""
PrintDesk exception hierarchy

Every domain error carries a machine-readable error code and an HTTP status so
the API layer can render it without knowing the concrete type.
"""
from typing import Any, Dict, Optional


class PrintDeskException(Exception):
    """Base class for all PrintDesk errors"""

    error_code = "PRINTDESK_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PrintDeskException):
    """Raised when an order, colour or filament id does not exist"""

    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type.capitalize()} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class OrderValidationError(PrintDeskException):
    """Raised when an order cannot be saved as entered"""

    error_code = "ORDER_INVALID"
    status_code = 400


class GatewayError(PrintDeskException):
    """Raised when the remote REST service cannot be reached or answers badly"""

    error_code = "GATEWAY_ERROR"
    status_code = 502
