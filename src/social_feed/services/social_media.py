"""Social media data access with read-through caching."""

import asyncio
import logging
from dataclasses import dataclass

from social_feed.adapters.social_media_client import SocialMediaSource
from social_feed.domain.social import Comment, Post, User
from social_feed.services.cache import CachedFetcher

_logger = logging.getLogger(__name__)


@dataclass
class SocialMediaService:
    """Service exposing users, posts and comments from a cached data source."""

    source: SocialMediaSource
    cache: CachedFetcher
    ttl_seconds: int = 300

    @property
    def ttl_millis(self) -> int:
        return self.ttl_seconds * 1000

    async def get_users(self) -> list[User]:
        """Return all users."""
        return await self.cache.get_or_fetch(
            "all_users",
            self.source.fetch_users,
            _to_users,
            ttl_millis=self.ttl_millis,
        )

    async def get_user_posts(self, user_id: str) -> list[Post]:
        """Return the posts written by a user."""
        return await self.cache.get_or_fetch(
            f"user_posts_{user_id}",
            lambda: self.source.fetch_user_posts(user_id),
            _to_posts,
            ttl_millis=self.ttl_millis,
        )

    async def get_post_comments(self, post_id: int) -> list[Comment]:
        """Return the comments left on a post."""
        return await self.cache.get_or_fetch(
            f"post_comments_{post_id}",
            lambda: self.source.fetch_post_comments(post_id),
            _to_comments,
            ttl_millis=self.ttl_millis,
        )

    async def get_all_posts(self) -> list[Post]:
        """Return the posts of every user, grouped in user order."""
        users = await self.get_users()
        per_user = await asyncio.gather(
            *(self.get_user_posts(user.id) for user in users)
        )
        posts = [post for user_posts in per_user for post in user_posts]
        _logger.debug("Collected %s posts from %s users", len(posts), len(users))
        return posts


def _to_users(payload: dict[str, object]) -> list[User]:
    """Map ``{"users": {id: name}}`` to users, keeping payload order."""
    users = payload["users"]
    return [User(id=str(user_id), name=str(name)) for user_id, name in users.items()]


def _to_posts(payload: dict[str, object]) -> list[Post]:
    return [
        Post(
            id=int(post["id"]),
            user_id=int(post["userid"]),
            content=str(post["content"]),
        )
        for post in payload["posts"]
    ]


def _to_comments(payload: dict[str, object]) -> list[Comment]:
    return [
        Comment(
            id=int(comment["id"]),
            post_id=int(comment["postid"]),
            content=str(comment["content"]),
        )
        for comment in payload["comments"]
    ]
