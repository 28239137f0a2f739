"""Tests for the XRPC client, with ``requests`` mocked out."""
from unittest import mock

import pytest
import requests

from feed.client import BlueskyClient
from feed.exceptions import BlueskyAPIError


def response(status_code=200, body=None):
    resp = mock.Mock(status_code=status_code, text="")
    resp.json.return_value = body if body is not None else {}
    return resp


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


def test_login_stores_session_token(session):
    session.post.return_value = response(body={"accessJwt": "jwt-1", "did": "did:plc:1", "handle": "vi.bsky.social"})
    client = BlueskyClient("https://bsky.social/", timeout=5, session=session)

    client.login("vi.bsky.social", "app-pass")

    session.post.assert_called_once_with(
        "https://bsky.social/xrpc/com.atproto.server.createSession",
        json={"identifier": "vi.bsky.social", "password": "app-pass"},
        headers={"Accept": "application/json"},
        timeout=5,
    )
    assert client.access_jwt == "jwt-1"
    assert client.did == "did:plc:1"


def test_login_rejected(session):
    session.post.return_value = response(401, {"error": "AuthenticationRequired", "message": "Invalid identifier or password"})
    client = BlueskyClient(session=session)

    with pytest.raises(BlueskyAPIError) as excinfo:
        client.login("vi.bsky.social", "wrong")

    assert excinfo.value.status_code == 401
    assert "Invalid identifier or password" in str(excinfo.value)
    assert client.access_jwt is None


def test_login_without_token_fails(session):
    session.post.return_value = response(body={"did": "did:plc:1"})
    with pytest.raises(BlueskyAPIError):
        BlueskyClient(session=session).login("vi.bsky.social", "app-pass")


def test_author_feed_sends_bearer_and_cursor(session):
    session.get.return_value = response(body={"feed": [], "cursor": "c2"})
    client = BlueskyClient(session=session, timeout=3)
    client.access_jwt = "jwt-1"

    data = client.get_author_feed("vi.bsky.social", limit=5, cursor="c1")

    assert data == {"feed": [], "cursor": "c2"}
    session.get.assert_called_once_with(
        "https://bsky.social/xrpc/app.bsky.feed.getAuthorFeed",
        params={"actor": "vi.bsky.social", "limit": 5, "cursor": "c1"},
        headers={"Accept": "application/json", "Authorization": "Bearer jwt-1"},
        timeout=3,
    )


def test_transport_errors_are_wrapped(session):
    session.get.side_effect = requests.Timeout("read timed out")
    with pytest.raises(BlueskyAPIError) as excinfo:
        BlueskyClient(session=session).get_author_feed("vi.bsky.social")
    assert excinfo.value.status_code is None


def test_invalid_json(session):
    resp = response()
    resp.json.side_effect = ValueError("not json")
    session.get.return_value = resp
    with pytest.raises(BlueskyAPIError):
        BlueskyClient(session=session).get_author_feed("vi.bsky.social")


def test_close_releases_only_its_own_session(session):
    BlueskyClient(session=session).close()
    session.close.assert_not_called()

    with mock.patch("feed.client.requests.Session") as session_cls:
        with BlueskyClient() as client:
            assert client.session is session_cls.return_value
    session_cls.return_value.close.assert_called_once_with()
