"""
Mapping of validated Bluesky posts onto ``FeedPost``.
"""
import logging
from urllib.parse import quote

from .types import FeedAuthor, FeedPost

logger = logging.getLogger(__name__)

PROFILE_URL = "https://bsky.app/profile/{handle}/post/{post_id}"
AVATAR_FALLBACK_URL = "https://ui-avatars.com/api/?name={name}&background=0D8ABC&color=fff"

IMAGE_EMBED_TYPES = (
    "app.bsky.embed.images",
    "app.bsky.embed.images#view",
    "app.bsky.embed.media",
)
MEDIA_EMBED_TYPES = (
    "app.bsky.embed.recordWithMedia",
    "app.bsky.embed.recordWithMedia#view",
)


def extract_post_id(uri):
    """``at://did:plc:xyz/app.bsky.feed.post/3kabc`` -> ``3kabc``."""
    if not isinstance(uri, str):
        return None
    post_id = uri.rstrip().split("/")[-1]
    return post_id or None


def first_image(embed):
    """Full-size URL of the first image attached to a post, if any."""
    if not isinstance(embed, dict):
        return None
    embed_type = embed.get("$type", "")
    if embed_type in MEDIA_EMBED_TYPES:
        return first_image(embed.get("media"))
    if embed_type not in IMAGE_EMBED_TYPES:
        return None
    images = embed.get("images") or []
    if not images or not isinstance(images[0], dict):
        return None
    return images[0].get("fullsize") or images[0].get("thumb")


def fallback_avatar(handle: str) -> str:
    return AVATAR_FALLBACK_URL.format(name=quote(handle, safe=""))


def post_url(handle: str, post_id: str) -> str:
    return PROFILE_URL.format(handle=handle, post_id=post_id)


def extract_location(record):
    """Free-text location some clients attach to the post record."""
    location = record.get("location") if isinstance(record, dict) else None
    if isinstance(location, dict):
        location = location.get("name") or location.get("address")
    return location if isinstance(location, str) and location.strip() else None


def map_post(item):
    """Map one validated ``FeedViewPost``; returns None if it cannot be mapped."""
    post = item["post"]
    record = post["record"]
    author = post["author"]
    handle = author["handle"]

    post_id = extract_post_id(post["uri"])
    if not post_id:
        logger.warning("Invalid post ID: %s", post.get("uri"))
        return None

    return FeedPost(
        id=post_id,
        text=record["text"],
        author=FeedAuthor(
            display_name=author.get("displayName") or handle,
            handle=handle,
            avatar=author.get("avatar") or fallback_avatar(handle),
        ),
        created_at=post["indexedAt"],
        url=post_url(handle, post_id),
        image=first_image(post.get("embed")),
        location=extract_location(record),
    )


def map_posts(items):
    posts = []
    for item in items:
        mapped = map_post(item)
        if mapped is not None:
            posts.append(mapped)
    return posts
