"""
Built-in posts served when the live feed cannot be used.

The widget is never empty: whenever the pipeline degrades it serves these
three posts instead.  They are built as ``FeedViewPost`` dicts and go
through the same mapping as live posts.
"""
from datetime import timedelta

from django.utils import timezone

from .mapping import map_posts
from .types import FeedPage

MOCK_HANDLE = "voicesignited.bsky.social"
MOCK_DISPLAY_NAME = "Voices Ignited"
MOCK_AVATAR = "https://ui-avatars.com/api/?name=VI&background=0D8ABC&color=fff"
MOCK_CURSOR = "mock-cursor"

MOCK_POSTS = [
    {
        "id": "mock1",
        "hours_ago": 2,
        "text": (
            "Excited to announce our latest community initiative! We're partnering with local "
            "organizations to expand our reach and impact. #VoicesIgnited #CommunityFirst"
        ),
        "image": "https://images.unsplash.com/photo-1531482615713-2afd69097998?auto=format&fit=crop&w=1350&q=80",
    },
    {
        "id": "mock2",
        "hours_ago": 24,
        "text": (
            "Join us this Saturday for our virtual workshop on effective community organizing "
            "strategies! Registration link in bio. #GrassrootsAction"
        ),
        "image": "https://images.unsplash.com/photo-1591115765373-5207764f72e7?auto=format&fit=crop&w=1350&q=80",
    },
    {
        "id": "mock3",
        "hours_ago": 48,
        "text": (
            "Check out our new resource hub for community organizers! We've compiled guides, "
            "templates, and best practices to help you amplify your impact. #ResourcesForChange"
        ),
        "image": "https://images.unsplash.com/photo-1589561253898-768105ca91a8?auto=format&fit=crop&w=1350&q=80",
    },
]


def mock_feed_items(now=None):
    now = now or timezone.now()
    items = []
    for mock in MOCK_POSTS:
        created_at = (now - timedelta(hours=mock["hours_ago"])).isoformat()
        items.append({
            "post": {
                "uri": f"at://mock/{mock['id']}",
                "cid": f"mock-cid-{mock['id']}",
                "author": {
                    "did": f"did:mock:{MOCK_HANDLE}",
                    "handle": MOCK_HANDLE,
                    "displayName": MOCK_DISPLAY_NAME,
                    "avatar": MOCK_AVATAR,
                },
                "record": {
                    "$type": "app.bsky.feed.post",
                    "text": mock["text"],
                    "createdAt": created_at,
                },
                "indexedAt": created_at,
                "embed": {
                    "$type": "app.bsky.embed.images#view",
                    "images": [{"thumb": mock["image"], "fullsize": mock["image"], "alt": "Post image"}],
                },
            }
        })
    return items


def mock_page(limit: int) -> FeedPage:
    """Mock posts sliced to ``limit``; pagination is simulated."""
    posts = map_posts(mock_feed_items()[:limit])
    has_more = len(posts) == limit
    return FeedPage(
        posts=posts,
        cursor=MOCK_CURSOR if has_more else None,
        has_more=has_more,
        degraded=True,
    )
