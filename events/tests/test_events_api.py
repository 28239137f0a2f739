"""
API tests for the events app.

Covers public submission and listing (unapproved events stay hidden),
the admin-only approval workflow, generic edits and deletion, and the
error envelope for bad ids and bad filters.
"""
from datetime import date, time
from unittest import mock

import pytest
from django.db import DatabaseError

from events.models import Event
from events.views import EventViewSet


POTLUCK = {
    "title": "Potluck",
    "description": "Bring a dish to share with your neighbours.",
    "date": "2025-06-01",
    "startTime": "17:00",
    "endTime": "20:00",
    "location": "Park",
}


@pytest.mark.django_db
def test_potluck_submission_hidden_until_approved(client, admin_user):
    """A public submission is created unapproved and only listed after approval."""
    resp = client.post("/api/events/", POTLUCK, content_type="application/json")
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    event = body["data"]
    assert event["approved"] is False
    assert event["type"] == "meeting"
    assert event["locationType"] == "online"
    assert event["startTime"] == "17:00"

    public = client.get("/api/events/").json()
    assert public["count"] == 0
    assert public["data"] == []

    client.force_login(admin_user)
    approve = client.put(
        f"/api/events/{event['id']}/", {"action": "approve"}, content_type="application/json"
    )
    assert approve.status_code == 200
    assert approve.json()["message"] == "Event approved successfully"

    client.logout()
    public = client.get("/api/events/").json()
    assert [e["id"] for e in public["data"]] == [event["id"]]


@pytest.mark.django_db
def test_public_listing_never_includes_pending(client, make_event):
    make_event(title="Approved", approved=True)
    make_event(title="Pending")

    for query in ("", "?showPending=true", "?showApproved=false"):
        titles = [e["title"] for e in client.get(f"/api/events/{query}").json()["data"]]
        assert titles == ["Approved"]


@pytest.mark.django_db
def test_admin_request_requires_admin(client, member_user, make_event):
    make_event()
    resp = client.get("/api/events/?adminRequest=true")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Unauthorized. Admin authentication required."}

    client.force_login(member_user)
    assert client.get("/api/events/?adminRequest=true").status_code == 401


@pytest.mark.django_db
def test_admin_listing_filters(auth_client, make_event):
    make_event(title="Approved", approved=True)
    make_event(title="Pending")

    everything = auth_client.get("/api/events/?adminRequest=true").json()
    assert everything["count"] == 2

    pending = auth_client.get("/api/events/?adminRequest=true&showPending=true").json()
    assert [e["title"] for e in pending["data"]] == ["Pending"]

    approved = auth_client.get("/api/events/?adminRequest=true&showApproved=true").json()
    assert [e["title"] for e in approved["data"]] == ["Approved"]


@pytest.mark.django_db
def test_listing_sorted_by_date_then_start_time(client, make_event):
    make_event(title="Late", date=date(2025, 6, 2), start_time=time(9, 0), end_time=time(10, 0), approved=True)
    make_event(title="Evening", date=date(2025, 6, 1), start_time=time(18, 0), end_time=time(19, 0), approved=True)
    make_event(title="Morning", date=date(2025, 6, 1), start_time=time(8, 0), end_time=time(9, 0), approved=True)

    titles = [e["title"] for e in client.get("/api/events/").json()["data"]]
    assert titles == ["Morning", "Evening", "Late"]


@pytest.mark.django_db
def test_month_type_and_limit_filters(client, make_event):
    make_event(title="June meeting", date=date(2025, 6, 30), approved=True)
    make_event(title="June social", date=date(2025, 6, 1), type=Event.TYPE_SOCIAL, approved=True)
    make_event(title="July meeting", date=date(2025, 7, 1), approved=True)

    june = client.get("/api/events/?month=6&year=2025").json()
    assert [e["title"] for e in june["data"]] == ["June social", "June meeting"]

    socials = client.get("/api/events/?type=social").json()
    assert [e["title"] for e in socials["data"]] == ["June social"]

    limited = client.get("/api/events/?limit=1").json()
    assert limited["count"] == 1

    # an unparsable limit is ignored
    assert client.get("/api/events/?limit=lots").json()["count"] == 3


@pytest.mark.django_db
def test_invalid_filters_rejected(client):
    resp = client.get("/api/events/?month=13&year=2025")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert body["errors"]

    assert client.get("/api/events/?type=party").status_code == 400


@pytest.mark.django_db
def test_create_validation_errors(client):
    payload = dict(POTLUCK, endTime="16:00", contactEmail="not-an-email")
    del payload["title"]
    resp = client.post("/api/events/", payload, content_type="application/json")
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert any(e.startswith("title:") for e in errors)
    assert any(e.startswith("contactEmail:") for e in errors)
    assert Event.objects.count() == 0


@pytest.mark.django_db
def test_create_ignores_approval_fields(client):
    payload = dict(POTLUCK, approved=True, approvedBy="Mallory")
    resp = client.post("/api/events/", payload, content_type="application/json")
    assert resp.status_code == 201
    event = Event.objects.get()
    assert event.approved is False
    assert event.approved_by == ""


@pytest.mark.django_db
def test_double_approve_is_noop(auth_client, make_event):
    event = make_event()
    url = f"/api/events/{event.pk}/"

    first = auth_client.put(url, {"action": "approve", "adminName": "Dana"}, content_type="application/json")
    assert first.status_code == 200
    data = first.json()["data"]
    assert data["approved"] is True
    assert data["approvedBy"] == "Dana"

    event.refresh_from_db()
    approved_at = event.approved_at

    second = auth_client.put(url, {"action": "approve", "adminName": "Eve"}, content_type="application/json")
    assert second.status_code == 400
    assert second.json() == {"success": False, "message": "Event is already approved"}

    event.refresh_from_db()
    assert event.approved_by == "Dana"
    assert event.approved_at == approved_at


@pytest.mark.django_db
def test_approve_defaults_to_requesting_admin(auth_client, make_event):
    event = make_event()
    resp = auth_client.patch(f"/api/events/{event.pk}", {"action": "approve"}, content_type="application/json")
    assert resp.status_code == 200
    assert resp.json()["data"]["approvedBy"] == "organizer"


@pytest.mark.django_db
def test_reject_removes_event(auth_client, make_event):
    event = make_event()
    url = f"/api/events/{event.pk}/"

    resp = auth_client.put(url, {"action": "reject"}, content_type="application/json")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Event rejected and removed"}
    assert not Event.objects.filter(pk=event.pk).exists()

    missing = auth_client.get(f"{url}?adminRequest=true")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Event not found"


@pytest.mark.django_db
def test_approve_missing_event_is_404(auth_client):
    resp = auth_client.put("/api/events/999/", {"action": "approve"}, content_type="application/json")
    assert resp.status_code == 404


@pytest.mark.django_db
def test_invalid_event_id(auth_client):
    resp = auth_client.get("/api/events/not-a-number/")
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid event ID format"}


@pytest.mark.django_db
def test_retrieve_hides_pending_without_admin_request(auth_client, make_event):
    event = make_event()
    assert auth_client.get(f"/api/events/{event.pk}/").status_code == 404

    resp = auth_client.get(f"/api/events/{event.pk}/?adminRequest=true")
    assert resp.status_code == 200
    assert resp.json()["data"]["title"] == "Community Potluck"


@pytest.mark.django_db
def test_admin_routes_require_authentication(client, make_event):
    event = make_event()
    url = f"/api/events/{event.pk}/"
    assert client.get(url).status_code == 401
    assert client.put(url, {"action": "approve"}, content_type="application/json").status_code == 401
    assert client.delete(url).status_code == 401
    assert Event.objects.filter(pk=event.pk, approved=False).exists()


@pytest.mark.django_db
def test_generic_patch_leaves_approval_untouched(auth_client, make_event):
    event = make_event()
    resp = auth_client.put(
        f"/api/events/{event.pk}/",
        {"title": "Spring Potluck", "approved": True},
        content_type="application/json",
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "Spring Potluck"
    assert data["description"] == "Bring a dish to share."
    assert data["approved"] is False


@pytest.mark.django_db
def test_generic_patch_validates_times(auth_client, make_event):
    event = make_event()
    resp = auth_client.patch(f"/api/events/{event.pk}/", {"endTime": "17:00"}, content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["errors"] == ["endTime: End time must be later than start time."]


@pytest.mark.django_db
def test_delete(auth_client, make_event):
    event = make_event()
    resp = auth_client.delete(f"/api/events/{event.pk}/")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Event deleted successfully"
    assert auth_client.delete(f"/api/events/{event.pk}/").status_code == 404


@pytest.mark.django_db
def test_database_error_is_generic_500(client):
    with mock.patch.object(EventViewSet.store, "find", side_effect=DatabaseError("connection refused")):
        resp = client.get("/api/events/")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}


@pytest.mark.django_db
def test_routes_without_trailing_slash(client, admin_user):
    created = client.post("/api/events", POTLUCK, content_type="application/json")
    assert created.status_code == 201
    event_id = created.json()["data"]["id"]

    listing = client.get("/api/events")
    assert listing.status_code == 200
    assert listing.json()["count"] == 0

    client.force_login(admin_user)
    approve = client.put(f"/api/events/{event_id}", {"action": "approve"}, content_type="application/json")
    assert approve.status_code == 200
    assert approve.json()["data"]["approved"] is True


@pytest.mark.django_db
def test_non_object_body_is_rejected(auth_client, make_event):
    event = make_event()
    resp = auth_client.put(f"/api/events/{event.pk}/", [1, 2], content_type="application/json")
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Request body must be a JSON object"}


@pytest.mark.django_db
def test_member_session_gets_401_on_admin_routes(client, member_user, make_event):
    event = make_event()
    client.force_login(member_user)
    url = f"/api/events/{event.pk}/"

    resp = client.get(url)
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Unauthorized. Admin authentication required."}
    assert client.put(url, {"action": "approve"}, content_type="application/json").status_code == 401
    assert client.delete(url).status_code == 401
