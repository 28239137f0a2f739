"""
Validation and sanitizing of raw ``getAuthorFeed`` payloads.

A page is filtered post by post: a malformed post is dropped, the rest of
the page survives.
"""
import logging
import re

from django.utils.dateparse import parse_datetime

logger = logging.getLogger(__name__)

CONTROL_CHARS = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
WHITESPACE = re.compile(r"\s+")


def sanitize_text(text) -> str:
    """Remove control characters and collapse runs of whitespace."""
    if not isinstance(text, str):
        return ""
    # \n and \t are control characters: they are removed, not turned into spaces
    return WHITESPACE.sub(" ", CONTROL_CHARS.sub("", text)).strip()


def is_valid_timestamp(value) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        return parse_datetime(value) is not None
    except ValueError:
        return False


def is_valid_post(item) -> bool:
    """Check one ``FeedViewPost`` for the fields the widget needs."""
    post = item.get("post") if isinstance(item, dict) else None
    if not isinstance(post, dict):
        return False

    uri = post.get("uri")
    if not isinstance(uri, str) or "/" not in uri or not uri.rsplit("/", 1)[-1]:
        return False

    record = post.get("record")
    if not isinstance(record, dict) or not sanitize_text(record.get("text")):
        return False

    author = post.get("author")
    if not isinstance(author, dict):
        return False
    handle = author.get("handle")
    if not isinstance(handle, str) or "." not in handle:
        return False

    return is_valid_timestamp(post.get("indexedAt"))


def clean_post(item) -> dict:
    """Copy of ``item`` with the record text sanitized."""
    post = dict(item["post"])
    record = dict(post["record"])
    record["text"] = sanitize_text(record.get("text"))
    post["record"] = record
    return {**item, "post": post}


def validate_feed(payload):
    """
    Return the valid, sanitized posts of a ``getAuthorFeed`` response, or
    ``None`` when the response itself is not shaped like one.
    """
    feed = payload.get("feed") if isinstance(payload, dict) else None
    if not isinstance(feed, list):
        logger.warning("Invalid API response structure")
        return None

    valid = [clean_post(item) for item in feed if is_valid_post(item)]
    dropped = len(feed) - len(valid)
    if dropped:
        logger.info("Dropped %d of %d posts that failed validation", dropped, len(feed))
    return valid


def is_valid_page(page) -> bool:
    """Final shape check on a mapped ``FeedPage`` before it is served."""
    if not isinstance(page.posts, list):
        return False
    return all(
        isinstance(post.id, str) and post.id
        and isinstance(post.text, str)
        and isinstance(post.url, str)
        and isinstance(post.created_at, str)
        and post.author is not None
        and isinstance(post.author.handle, str)
        for post in page.posts
    )
