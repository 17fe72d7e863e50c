# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

from roof_layout.core.errors import InputValidationError, UnsolvableLayoutError

logger = logging.getLogger("roof_layout.api")


class APIError(Exception):
    """
    Base class for API-specific exceptions.

    This class extends the standard Exception to include HTTP status codes
    and structured error details for API responses.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the APIError with HTTP status and details.

        Args:
            status_code: HTTP status code to return
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
            extra: Optional additional error context
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """
        Convert to FastAPI HTTPException.

        Returns:
            HTTPException with appropriate status code and details
        """
        error_response = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )


class LayoutValidationError(APIError):
    """Error raised when a measurement batch is rejected before solving."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize with validation details.

        Args:
            detail: Validation error details
            field: Optional field that failed validation
            extra: Optional additional context
        """
        message = "Validation error"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            internal_code="validation_error",
            extra=extra
        )


class UnsolvableLayoutAPIError(APIError):
    """Error raised when the tolerances admit no layout at all."""
    def __init__(self, detail: str, axis: str):
        """
        Initialize with the solver message.

        Args:
            detail: Solver error message
            axis: "horizontal" or "vertical"
        """
        super().__init__(
            status_code=422,
            detail=detail,
            internal_code="unsolvable_layout",
            extra={"axis": axis}
        )


def handle_exception(e: Exception, axis: str = "layout") -> HTTPException:
    """
    Handle exceptions and convert to appropriate HTTPExceptions.

    Solver errors map to 400 (bad measurements) and 422 (contradictory
    tolerances); anything else is logged and returned as a 500.

    Args:
        e: The exception to handle
        axis: Which solver was running (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    if isinstance(e, APIError):
        return e.to_http_exception()

    if isinstance(e, HTTPException):
        return e

    if isinstance(e, InputValidationError):
        extra = {"values": e.values} if e.values else None
        return LayoutValidationError(str(e), field=e.field, extra=extra).to_http_exception()

    if isinstance(e, UnsolvableLayoutError):
        return UnsolvableLayoutAPIError(str(e), axis=axis).to_http_exception()

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "detail": f"An unexpected error occurred: {str(e)}",
            "code": "internal_server_error",
            "axis": axis,
        }
    )
