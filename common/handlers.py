"""
DRF exception handler producing the site's JSON error envelope.

Two envelopes are in use:

* ``{"success": false, "message": ..., "errors": [...]}`` for the events
  and auth endpoints (``errors`` only for validation failures);
* ``{"error": ..., "details": ...}`` for views that set
  ``error_envelope = "detail"`` (the Bluesky feed endpoint).
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import AuthRequired, ServiceError

logger = logging.getLogger(__name__)


def flatten_errors(detail, prefix=""):
    """Turn a nested DRF error structure into a flat list of messages."""
    if isinstance(detail, dict):
        messages = []
        for field, value in detail.items():
            label = "" if field == "non_field_errors" else field
            if prefix and label:
                label = f"{prefix}.{label}"
            messages.extend(flatten_errors(value, label or prefix))
        return messages
    if isinstance(detail, (list, tuple)):
        messages = []
        for item in detail:
            messages.extend(flatten_errors(item, prefix))
        return messages
    text = str(detail)
    return [f"{prefix}: {text}" if prefix else text]


def _envelope(view, message, errors=None, details=None):
    if getattr(view, "error_envelope", "success") == "detail":
        return {"error": message, "details": details if details is not None else message}
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


def api_exception_handler(exc, context):
    view = context.get("view")

    if isinstance(exc, DatabaseError):
        logger.exception("Database error while handling %s", type(view).__name__ if view else "request")
        return Response(
            _envelope(view, "Internal server error", details="Database unavailable"),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        auth_header = getattr(exc, "auth_header", None)
        if isinstance(exc, AuthenticationFailed):
            detail = exc.detail.get("detail", AuthRequired.default_detail) if isinstance(exc.detail, dict) else exc.detail
            exc = AuthRequired(detail)
        else:
            exc = AuthRequired()
        exc.auth_header = auth_header

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = _envelope(view, "Validation error", errors=flatten_errors(exc.detail))
        return response

    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc.detail)
        response.data = _envelope(view, str(exc.detail), details=exc.details)
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
    response.data = _envelope(view, str(detail))
    return response
