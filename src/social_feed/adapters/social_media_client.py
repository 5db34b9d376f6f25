"""Social media platform API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SocialMediaSource(Protocol):
    """Interface for retrieving raw social media payloads."""

    async def fetch_users(self) -> dict[str, object]:
        """Return ``{"users": {id: name}}``."""

    async def fetch_user_posts(self, user_id: str) -> dict[str, object]:
        """Return ``{"posts": [...]}`` for a user."""

    async def fetch_post_comments(self, post_id: int) -> dict[str, object]:
        """Return ``{"comments": [...]}`` for a post."""

    async def close(self) -> None:
        """Release any held resources."""


@dataclass
class HttpxSocialMediaClient(SocialMediaSource):
    """HTTPX-backed client for the upstream social media API."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxSocialMediaClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_users(self) -> dict[str, object]:
        """Fetch all users."""
        return await self._get_json("/users")

    async def fetch_user_posts(self, user_id: str) -> dict[str, object]:
        """Fetch the posts of a single user."""
        return await self._get_json(f"/users/{user_id}/posts")

    async def fetch_post_comments(self, post_id: int) -> dict[str, object]:
        """Fetch the comments of a single post."""
        return await self._get_json(f"/posts/{post_id}/comments")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get_json(self, path: str) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}{path}", timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()
