"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from social_feed.adapters.social_media_client import HttpxSocialMediaClient


def _client(handler) -> HttpxSocialMediaClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxSocialMediaClient(
        base_url="https://social.test/api", http_client=async_client
    )


def test_social_media_client_fetches_resources() -> None:
    seen_paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_paths.append(request.url.path)
        if request.url.path.endswith("/comments"):
            return httpx.Response(200, json={"comments": []})
        if request.url.path.endswith("/posts"):
            return httpx.Response(200, json={"posts": []})
        return httpx.Response(200, json={"users": {"1": "John Doe"}})

    client = _client(handler)

    users = asyncio.run(client.fetch_users())
    posts = asyncio.run(client.fetch_user_posts("1"))
    comments = asyncio.run(client.fetch_post_comments(246))

    assert users == {"users": {"1": "John Doe"}}
    assert posts == {"posts": []}
    assert comments == {"comments": []}
    assert seen_paths == [
        "/api/users",
        "/api/users/1/posts",
        "/api/posts/246/comments",
    ]


def test_social_media_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_users())


def test_create_strips_trailing_slash() -> None:
    client = HttpxSocialMediaClient.create("https://social.test/api/", 5)

    assert client.base_url == "https://social.test/api"
    assert client.timeout_seconds == 5
    asyncio.run(client.close())
