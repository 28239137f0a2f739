"""Errors raised by the Bluesky client and the feed endpoint."""
from common.exceptions import AuthRequired, InvalidInput, UpstreamError


class BlueskyAPIError(Exception):
    """Transport failure or non-2xx response from the Bluesky XRPC API."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class InvalidFeedQuery(InvalidInput):
    default_detail = "Invalid query parameter"
    default_code = "invalid_feed_query"


class FeedConfigError(UpstreamError):
    default_detail = "BlueSky API configuration error"
    default_code = "feed_config_error"


class FeedAuthError(AuthRequired):
    default_detail = "BlueSky authentication failed"
    default_code = "feed_auth_failed"
