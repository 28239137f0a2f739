"""
Tagged error types shared by the API.

Every failure the service reports belongs to one ``ErrorKind``.  The
concrete exceptions are DRF ``APIException`` subclasses so views can
simply ``raise`` them and let ``common.handlers.api_exception_handler``
render the response.  ``DEGRADED`` has no exception: the feed pipeline
serves fallback content instead of failing.
"""
from enum import Enum

from rest_framework import status
from rest_framework.exceptions import APIException


class ErrorKind(str, Enum):
    CLIENT_INPUT = "client_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    DEGRADED = "degraded"


class ServiceError(APIException):
    """Base class for errors raised by services and views."""

    kind = ErrorKind.UPSTREAM
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "error"

    def __init__(self, detail=None, code=None, details=None):
        super().__init__(detail=detail, code=code)
        # free-form context for the response body (e.g. the upstream message)
        self.details = details


class InvalidInput(ServiceError):
    kind = ErrorKind.CLIENT_INPUT
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "invalid"


class AuthRequired(ServiceError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized. Admin authentication required."
    default_code = "not_authenticated"


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class UpstreamError(ServiceError):
    kind = ErrorKind.UPSTREAM
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Upstream service error"
    default_code = "upstream_error"
