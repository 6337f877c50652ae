"""Maps domain errors to HTTP responses without exposing internal details."""

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from event_registry.domain.errors import DomainError, ErrorCode

logger = structlog.get_logger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SCHEDULE_ENTRY_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SCHEDULE_ENTRY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.UPLOAD_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.REPOSITORY_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(error: DomainError) -> dict:
    body = {"code": error.code.value, "message": error.message}
    field = getattr(error, "field", None)
    if field is not None:
        body["field"] = field
    return {"error": body}


def exception_handler(exc, context):
    """DRF exception handler that understands DomainError."""
    if isinstance(exc, DomainError):
        http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if http_status >= 500:
            view = type(context.get("view")).__name__
            logger.error("request_failed", code=exc.code.value, view=view)
        return Response(error_body(exc), status=http_status)
    return drf_exception_handler(exc, context)
