"""
Minimal Bluesky XRPC client.

Only the two calls the feed widget needs: ``createSession`` to log in
with an app password and ``getAuthorFeed`` to read one page of posts.
"""
import logging

import requests

from .exceptions import BlueskyAPIError

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "https://bsky.social"


class BlueskyClient:
    def __init__(self, service_url=DEFAULT_SERVICE_URL, timeout=10, session=None):
        self.service_url = service_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.access_jwt = None
        self.did = None

    def close(self):
        """Release the connection pool when the client created its own session."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _url(self, method: str) -> str:
        return f"{self.service_url}/xrpc/{method}"

    def _headers(self):
        headers = {"Accept": "application/json"}
        if self.access_jwt:
            headers["Authorization"] = f"Bearer {self.access_jwt}"
        return headers

    def _parse(self, resp, method):
        if resp.status_code != 200:
            try:
                body = resp.json() or {}
            except ValueError:
                body = {}
            message = body.get("message") or body.get("error") or resp.text[:300]
            logger.warning("[Bluesky] %s failed status=%s message=%r", method, resp.status_code, message)
            raise BlueskyAPIError(f"{method} failed ({resp.status_code}): {message}", resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise BlueskyAPIError(f"{method} returned invalid JSON") from exc

    def login(self, identifier: str, password: str) -> dict:
        method = "com.atproto.server.createSession"
        try:
            resp = self.session.post(
                self._url(method),
                json={"identifier": identifier, "password": password},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise BlueskyAPIError(f"{method} request failed: {exc}") from exc

        data = self._parse(resp, method)
        self.access_jwt = data.get("accessJwt")
        self.did = data.get("did")
        if not self.access_jwt:
            raise BlueskyAPIError(f"{method} response missing accessJwt")
        logger.info("[Bluesky] Authenticated as %s", data.get("handle", identifier))
        return data

    def get_author_feed(self, actor: str, limit: int = 10, cursor=None) -> dict:
        method = "app.bsky.feed.getAuthorFeed"
        params = {"actor": actor, "limit": limit}
        if cursor:
            params["cursor"] = cursor
        try:
            resp = self.session.get(
                self._url(method),
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise BlueskyAPIError(f"{method} request failed: {exc}") from exc

        data = self._parse(resp, method)
        logger.debug("[Bluesky] %s actor=%s returned %d items", method, actor, len(data.get("feed") or []))
        return data
