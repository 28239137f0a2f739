"""
Tests for the approval workflow in ``events.services``.
"""
import pytest

from events.exceptions import ApprovalNoOp, EventNotFound, InvalidEventId
from events.models import Event
from events.services import apply_action, approve_event, reject_event
from events.store import EventStore


@pytest.mark.django_db
def test_only_one_of_two_approvals_wins(make_event):
    event = make_event()
    store = EventStore()

    # both admins load the pending event, then race on the conditional update
    assert store.mark_approved(event.pk, "Dana") == 1
    assert store.mark_approved(event.pk, "Eve") == 0

    event.refresh_from_db()
    assert event.approved is True
    assert event.approved_by == "Dana"


@pytest.mark.django_db
def test_approve_sets_approval_fields(make_event):
    event = approve_event(make_event().pk, "Dana")
    assert event.approved is True
    assert event.approved_by == "Dana"
    assert event.approved_at is not None


@pytest.mark.django_db
def test_approve_without_name_uses_default(make_event):
    assert approve_event(make_event().pk, "  ").approved_by == "Admin"


@pytest.mark.django_db
def test_second_approve_raises_noop(make_event):
    event = make_event()
    approve_event(event.pk, "Dana")
    with pytest.raises(ApprovalNoOp):
        approve_event(event.pk, "Eve")


@pytest.mark.django_db
def test_approve_and_reject_missing_event():
    with pytest.raises(EventNotFound):
        approve_event(42)
    with pytest.raises(EventNotFound):
        reject_event(42)


@pytest.mark.django_db
def test_reject_deletes(make_event):
    event = make_event(approved=True)
    assert apply_action(event.pk, "reject", "Dana") is None
    assert not Event.objects.filter(pk=event.pk).exists()


@pytest.mark.django_db
def test_malformed_ids():
    store = EventStore()
    for value in ("abc", "0", "-3", "1.5", ""):
        with pytest.raises(InvalidEventId):
            store.get(value)


def test_unknown_action():
    with pytest.raises(ValueError):
        apply_action(1, "archive")


@pytest.mark.django_db
def test_admin_bulk_approve(client, django_user_model, make_event):
    superuser = django_user_model.objects.create_superuser("root", "root@example.com", "pass12345")
    pending = make_event(title="Pending")
    already = make_event(title="Already", approved=True, approved_by="Dana")
    client.force_login(superuser)

    resp = client.post("/django-admin/events/event/", {
        "action": "approve_selected",
        "_selected_action": [pending.pk, already.pk],
    })

    assert resp.status_code == 302
    pending.refresh_from_db()
    already.refresh_from_db()
    assert pending.approved_by == "root"
    assert already.approved_by == "Dana"
