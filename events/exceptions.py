"""Errors raised by the event store and the approval workflow."""
from common.exceptions import InvalidInput, NotFoundError


class InvalidEventId(InvalidInput):
    default_detail = "Invalid event ID format"
    default_code = "invalid_event_id"


class EventNotFound(NotFoundError):
    default_detail = "Event not found"
    default_code = "event_not_found"


class ApprovalNoOp(InvalidInput):
    """The conditional approval matched nothing: the event is already approved."""

    default_detail = "Event is already approved"
    default_code = "approval_noop"
