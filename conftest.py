"""
Common test fixtures for the API and page tests.

Provides a staff user, a client authenticated with a JWT pair obtained
from the token endpoint, and a factory for events.
"""
from datetime import date, time, timedelta

import pytest
from django.contrib.auth.models import User
from django.core.cache import cache

from events.models import Event


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Throttle counters live in the cache; start every test with a fresh one."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_user(db):
    """Create a staff user."""
    return User.objects.create_user(
        username="organizer", password="pass12345", email="organizer@example.com", is_staff=True
    )


@pytest.fixture
def member_user(db):
    """A regular, non-staff account."""
    return User.objects.create_user(username="member", password="pass12345", email="member@example.com")


@pytest.fixture
def auth_client(client, admin_user):
    """Authenticate the Django test client using JWT tokens."""
    resp = client.post(
        "/api/auth/token/",
        {"username": "organizer", "password": "pass12345"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["access"]
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client


@pytest.fixture
def make_event(db):
    """Factory creating an event dated a week from today unless overridden."""
    def _make(**overrides):
        fields = {
            "title": "Community Potluck",
            "description": "Bring a dish to share.",
            "date": date.today() + timedelta(days=7),
            "start_time": time(18, 0),
            "end_time": time(20, 0),
            "location": "Community Center",
        }
        fields.update(overrides)
        return Event.objects.create(**fields)
    return _make
