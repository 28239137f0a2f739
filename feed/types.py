"""
Normalized feed shapes.

Posts are fetched per request, mapped from Bluesky's schema, rendered and
discarded; nothing here is persisted.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FeedAuthor:
    display_name: str
    handle: str
    avatar: str

    def to_dict(self) -> dict:
        return {"displayName": self.display_name, "handle": self.handle, "avatar": self.avatar}


@dataclass
class FeedPost:
    """A Bluesky post as the site displays it."""
    id: str                            # trailing segment of the at:// URI
    text: str                          # sanitized post text
    author: FeedAuthor
    created_at: str                    # ISO timestamp (indexedAt)
    url: str                           # https://bsky.app/profile/<handle>/post/<id>
    image: Optional[str] = None        # first full-size image, if any
    location: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "text": self.text,
            "author": self.author.to_dict(),
            "createdAt": self.created_at,
            "url": self.url,
        }
        if self.image:
            data["image"] = self.image
        if self.location:
            data["location"] = self.location
        return data


@dataclass
class FeedPage:
    posts: List[FeedPost] = field(default_factory=list)
    cursor: Optional[str] = None
    has_more: bool = False
    degraded: bool = False             # served from the built-in mock posts

    def to_dict(self) -> dict:
        return {
            "posts": [post.to_dict() for post in self.posts],
            "cursor": self.cursor,
            "hasMore": self.has_more,
        }
