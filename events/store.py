"""
Event Store Adapter.

Wraps the ``Event`` manager behind a small object that views receive
explicitly (``EventViewSet.store``) instead of reaching for the ORM
directly.  It owns filter construction, the approval-visibility rule and
the conditional update the approval workflow relies on.
"""
import logging

from django.utils import timezone

from rest_framework.exceptions import ValidationError

from .exceptions import EventNotFound, InvalidEventId
from .filters import EventFilter
from .models import Event

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes"}


def parse_event_id(value) -> int:
    """Return the integer primary key or raise ``InvalidEventId``."""
    text = str(value).strip()
    if not text.isdigit() or int(text) < 1:
        raise InvalidEventId()
    return int(text)


def parse_limit(value):
    """Positive integer limit, or None when absent or unparsable."""
    if value in (None, ""):
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None


def query_flag(params, name) -> bool:
    return str(params.get(name, "false")).lower() in TRUE_VALUES


class EventStore:
    def __init__(self, manager=None):
        self.manager = manager if manager is not None else Event.objects

    def queryset(self):
        return self.manager.all()

    def find(self, params=None, *, admin=False):
        """
        List events matching ``params`` (a query dict) sorted by date then
        start time.  Non-admin callers only ever see approved events.
        """
        params = params or {}
        filterset = EventFilter(params, queryset=self.queryset())
        if not filterset.is_valid():
            raise ValidationError({
                field: [err["message"] for err in errs]
                for field, errs in filterset.errors.get_json_data().items()
            })
        qs = filterset.qs

        if not admin:
            qs = qs.filter(approved=True)
        elif query_flag(params, "showPending"):
            qs = qs.filter(approved=False)
        elif query_flag(params, "showApproved"):
            qs = qs.filter(approved=True)

        qs = qs.order_by("date", "start_time")

        limit = parse_limit(params.get("limit"))
        if limit:
            qs = qs[:limit]

        events = list(qs)
        logger.debug("Found %d events (admin=%s, params=%s)", len(events), admin, dict(params))
        return events

    def upcoming(self, limit=3):
        """Approved events dated today or later."""
        today = timezone.localdate()
        return list(
            self.manager.filter(approved=True, date__gte=today).order_by("date", "start_time")[:limit]
        )

    def get(self, event_id) -> Event:
        pk = parse_event_id(event_id)
        try:
            return self.manager.get(pk=pk)
        except Event.DoesNotExist:
            raise EventNotFound()

    def exists(self, event_id) -> bool:
        return self.manager.filter(pk=parse_event_id(event_id)).exists()

    def create(self, data) -> Event:
        return self.manager.create(**data)

    def update(self, event: Event, data) -> Event:
        for field, value in data.items():
            setattr(event, field, value)
        event.save()
        return event

    def delete(self, event_id) -> None:
        deleted, _ = self.manager.filter(pk=parse_event_id(event_id)).delete()
        if not deleted:
            raise EventNotFound()

    def mark_approved(self, event_id, approved_by: str) -> int:
        """
        Match-and-set on ``{id, approved: false}``.  Returns the number of
        rows updated, which is 0 when the event is missing or already
        approved.
        """
        return self.manager.filter(pk=parse_event_id(event_id), approved=False).update(
            approved=True,
            approved_by=approved_by,
            approved_at=timezone.now(),
            updated_at=timezone.now(),
        )
