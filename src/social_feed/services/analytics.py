"""Rankings derived from social media activity."""

import asyncio
from dataclasses import dataclass

from social_feed.domain.social import PostEngagement, UserActivity
from social_feed.services.social_media import SocialMediaService


@dataclass
class AnalyticsService:
    """Computes top users and trending posts."""

    social_media: SocialMediaService

    async def top_users(self, limit: int = 5) -> list[UserActivity]:
        """Return users with the most posts, most active first.

        Users with equal post counts keep their original order.
        """
        if limit <= 0:
            return []
        users = await self.social_media.get_users()
        per_user = await asyncio.gather(
            *(self.social_media.get_user_posts(user.id) for user in users)
        )
        activity = [
            UserActivity(user=user, post_count=len(posts))
            for user, posts in zip(users, per_user, strict=True)
        ]
        activity.sort(key=lambda item: item.post_count, reverse=True)
        return activity[:limit]

    async def trending_posts(self) -> list[PostEngagement]:
        """Return every post that shares the highest comment count."""
        posts = await self.social_media.get_all_posts()
        if not posts:
            return []
        per_post = await asyncio.gather(
            *(self.social_media.get_post_comments(post.id) for post in posts)
        )
        engagement = [
            PostEngagement(post=post, comment_count=len(comments))
            for post, comments in zip(posts, per_post, strict=True)
        ]
        max_comments = max(item.comment_count for item in engagement)
        return [item for item in engagement if item.comment_count == max_comments]
