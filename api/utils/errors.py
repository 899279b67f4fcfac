# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

from deck_designer.core.errors import (
    ComputationError,
    DeckDesignerError,
    InvalidMeasurementError,
    InvalidSpacingError,
    ProjectFileError,
)

logger = logging.getLogger("deck_designer.api")


class APIError(Exception):
    """
    Base class for API-specific exceptions.

    Carries an HTTP status code and structured error details for API
    responses.
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
        """Convert to FastAPI HTTPException."""
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


class ValidationError(APIError):
    """Error raised for input validation failures."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
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


class DesignTooLargeError(APIError):
    """Error raised when a design would generate more members than allowed."""
    def __init__(self, member_count: int, limit: int):
        super().__init__(
            status_code=413,
            detail=f"Design would generate {member_count} members (limit {limit})",
            internal_code="design_too_large",
            extra={"member_count": member_count, "limit": limit}
        )


def from_domain_error(e: DeckDesignerError) -> APIError:
    """Map a deck_designer error onto the matching APIError."""
    if isinstance(e, InvalidSpacingError):
        return ValidationError(e.detail, field=e.field, extra={"value": repr(e.value)})
    if isinstance(e, InvalidMeasurementError):
        return ValidationError(e.detail, field="text")
    if isinstance(e, ProjectFileError):
        return ValidationError(e.detail, extra={"errors": e.errors})
    if isinstance(e, ComputationError):
        return APIError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.detail,
            internal_code="computation_error",
            extra={"component": e.component}
        )
    return APIError(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=e.detail,
        internal_code="deck_designer_error",
        extra=e.extra
    )


def handle_exception(e: Exception, resource_type: str = "deck") -> HTTPException:
    """
    Convert exceptions to appropriate HTTPExceptions.

    Args:
        e: The exception to handle
        resource_type: Kind of resource being processed (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    if isinstance(e, APIError):
        return e.to_http_exception()

    if isinstance(e, HTTPException):
        return e

    if isinstance(e, DeckDesignerError):
        logger.warning(f"Rejected {resource_type} request: {e.detail}")
        return from_domain_error(e).to_http_exception()

    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    error_response = {
        "detail": f"An unexpected error occurred: {str(e)}",
        "code": "internal_server_error"
    }

    if resource_type:
        error_response["resource_type"] = resource_type

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_response
    )
