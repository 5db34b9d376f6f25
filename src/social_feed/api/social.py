"""Social media REST endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from social_feed.api.social_models import CommentModel, PostModel, UserModel, dump

if TYPE_CHECKING:
    from social_feed.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["social"])


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": message}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@router.get("/users", response_model=None)
async def list_users(request: Request) -> dict[str, object] | JSONResponse:
    """Return all users."""
    container: AppContainer = request.app.state.container
    try:
        users = await container.social_media_service.get_users()
    except Exception:
        logger.exception("Error fetching users")
        return _error("Failed to fetch users")
    logger.info("Successfully retrieved %s users", len(users))
    return {"users": dump([UserModel.from_user(user) for user in users])}


@router.get("/users/{user_id}/posts", response_model=None)
async def list_user_posts(
    user_id: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return the posts of a single user."""
    container: AppContainer = request.app.state.container
    try:
        posts = await container.social_media_service.get_user_posts(user_id)
    except Exception:
        logger.exception("Error fetching posts for user %s", user_id)
        return _error("Failed to fetch posts")
    logger.info("Successfully retrieved %s posts for user %s", len(posts), user_id)
    return {"posts": dump([PostModel.from_post(post) for post in posts])}


@router.get("/posts/{post_id}/comments", response_model=None)
async def list_post_comments(
    post_id: int, request: Request
) -> dict[str, object] | JSONResponse:
    """Return the comments of a single post."""
    container: AppContainer = request.app.state.container
    try:
        comments = await container.social_media_service.get_post_comments(post_id)
    except Exception:
        logger.exception("Error fetching comments for post %s", post_id)
        return _error("Failed to fetch comments")
    logger.info(
        "Successfully retrieved %s comments for post %s", len(comments), post_id
    )
    return {
        "comments": dump([CommentModel.from_comment(comment) for comment in comments])
    }


@router.get("/posts", response_model=None)
async def list_posts(request: Request) -> dict[str, object] | JSONResponse:
    """Return the posts of every user."""
    container: AppContainer = request.app.state.container
    try:
        posts = await container.social_media_service.get_all_posts()
    except Exception:
        logger.exception("Error fetching all posts")
        return _error("Failed to fetch posts")
    logger.info("Successfully retrieved %s posts in total", len(posts))
    return {"posts": dump([PostModel.from_post(post) for post in posts])}


@router.get("/analytics/top-users", response_model=None)
async def top_users(
    request: Request, limit: int = Query(default=5, ge=1)
) -> dict[str, object] | JSONResponse:
    """Return the users with the most posts."""
    container: AppContainer = request.app.state.container
    try:
        activity = await container.analytics_service.top_users(limit)
    except Exception:
        logger.exception("Error ranking top users")
        return _error("Failed to fetch top users")
    logger.info("Successfully ranked %s top users", len(activity))
    return {"users": dump([UserModel.from_activity(item) for item in activity])}


@router.get("/analytics/trending-posts", response_model=None)
async def trending_posts(request: Request) -> dict[str, object] | JSONResponse:
    """Return the posts with the highest comment count."""
    container: AppContainer = request.app.state.container
    try:
        engagement = await container.analytics_service.trending_posts()
    except Exception:
        logger.exception("Error ranking trending posts")
        return _error("Failed to fetch trending posts")
    logger.info("Successfully retrieved %s trending posts", len(engagement))
    return {"posts": dump([PostModel.from_engagement(item) for item in engagement])}
