"""Builders and a fake client shared by the feed tests."""
from feed.exceptions import BlueskyAPIError


def feed_item(rkey="3kabc", text="Hello from the rally!", handle="voicesignited.bsky.social", **post_fields):
    post = {
        "uri": f"at://did:plc:abc123/app.bsky.feed.post/{rkey}",
        "cid": f"cid-{rkey}",
        "author": {
            "did": "did:plc:abc123",
            "handle": handle,
            "displayName": "Voices Ignited",
            "avatar": "https://cdn.bsky.app/img/avatar/abc.jpg",
        },
        "record": {"$type": "app.bsky.feed.post", "text": text, "createdAt": "2025-05-01T12:00:00.000Z"},
        "indexedAt": "2025-05-01T12:00:01.000Z",
    }
    post.update(post_fields)
    return {"post": post}


class FakeBlueskyClient:
    """Stands in for ``BlueskyClient``; failures are consumed one per call."""

    def __init__(self, payload=None, login_failures=0, feed_failures=0):
        self.payload = payload if payload is not None else {"feed": [feed_item()]}
        self.login_failures = login_failures
        self.feed_failures = feed_failures
        self.login_calls = []
        self.feed_calls = []
        self.closed = False

    def close(self):
        self.closed = True

    def login(self, identifier, password):
        self.login_calls.append((identifier, password))
        if self.login_failures:
            self.login_failures -= 1
            raise BlueskyAPIError("createSession failed (401): Invalid identifier or password", 401)
        return {"accessJwt": "jwt", "did": "did:plc:abc123", "handle": identifier}

    def get_author_feed(self, actor, limit=10, cursor=None):
        self.feed_calls.append((actor, limit, cursor))
        if self.feed_failures:
            self.feed_failures -= 1
            raise BlueskyAPIError("getAuthorFeed failed (502): Bad Gateway", 502)
        return self.payload
