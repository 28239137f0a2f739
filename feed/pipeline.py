"""
Feed ingestion pipeline.

One run per request, strictly sequential::

    authenticate -> FETCHING -> VALIDATING -> SERVING
                        \\            \\
                         +------------+--> DEGRADED

Authentication problems are errors (missing credentials -> 500, login
still failing after retries -> 401).  Everything after a successful login
that goes wrong (fetch failing after retries, a malformed payload, zero
valid posts, a mapped page failing its final shape check) takes the single
DEGRADED transition and serves the built-in mock posts.
"""
import logging
import time
from enum import Enum

from django.conf import settings

from .client import BlueskyClient
from .exceptions import BlueskyAPIError, FeedAuthError, FeedConfigError
from .handles import normalize_handle
from .mapping import map_posts
from .mock import mock_page
from .retry import RetryPolicy, retry_with_backoff
from .types import FeedPage
from .validation import is_valid_page, validate_feed

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100


class FeedState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    VALIDATING = "validating"
    SERVING = "serving"
    DEGRADED = "degraded"


class FeedPipeline:
    def __init__(self, client, username, password, policy=None, sleep=time.sleep):
        self.client = client
        self.username = normalize_handle(username) if username else ""
        self.password = password or ""
        self.policy = policy or RetryPolicy()
        self.sleep = sleep
        self.state = FeedState.IDLE
        self.history = [FeedState.IDLE]
        self.degrade_reason = None

    @classmethod
    def from_settings(cls):
        client = BlueskyClient(
            service_url=settings.BLUESKY_SERVICE_URL,
            timeout=settings.BLUESKY_TIMEOUT,
        )
        policy = RetryPolicy(
            max_retries=settings.BLUESKY_RETRIES,
            base_delay_s=settings.BLUESKY_RETRY_DELAY,
        )
        return cls(client, settings.BLUESKY_USERNAME, settings.BLUESKY_APP_PASSWORD, policy=policy)

    def close(self):
        self.client.close()

    def _transition(self, state: FeedState):
        logger.debug("Feed pipeline %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _degrade(self, limit: int, reason: str) -> FeedPage:
        self.degrade_reason = reason
        self._transition(FeedState.DEGRADED)
        logger.warning("Serving mock feed posts: %s", reason)
        return mock_page(limit)

    def _retry(self, fn):
        return retry_with_backoff(fn, self.policy, retry_on=(BlueskyAPIError,), sleep=self.sleep)

    def authenticate(self):
        if not self.username or not self.password:
            logger.error("Missing BlueSky credentials")
            raise FeedConfigError(details="Missing required credentials")
        try:
            self._retry(lambda: self.client.login(self.username, self.password))
        except BlueskyAPIError as exc:
            logger.error("BlueSky authentication failed after retries for %s: %s", self.username, exc)
            raise FeedAuthError(details=str(exc))

    def run(self, actor=None, limit=DEFAULT_LIMIT, cursor=None) -> FeedPage:
        actor = normalize_handle(actor) if actor else self.username
        self.authenticate()

        self._transition(FeedState.FETCHING)
        logger.info("Fetching BlueSky feed actor=%s limit=%s cursor=%s", actor, limit, cursor)
        try:
            payload = self._retry(lambda: self.client.get_author_feed(actor, limit, cursor))

            self._transition(FeedState.VALIDATING)
            valid = validate_feed(payload)
            if not valid:
                return self._degrade(limit, "no valid posts in API response")

            posts = map_posts(valid)
            if not posts:
                return self._degrade(limit, "no valid posts after formatting")

            next_cursor = payload.get("cursor") or None
            page = FeedPage(posts=posts, cursor=next_cursor, has_more=bool(next_cursor))
            if not is_valid_page(page):
                return self._degrade(limit, "final response validation failed")
        except Exception as exc:
            logger.exception("Error fetching BlueSky posts for %s", actor)
            return self._degrade(limit, f"fetch error: {exc}")

        self._transition(FeedState.SERVING)
        logger.info("Serving %d BlueSky posts for %s", len(page.posts), actor)
        return page
