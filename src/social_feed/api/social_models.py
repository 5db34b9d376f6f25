"""Pydantic response models for the social media API."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from social_feed.domain.social import (
    Comment,
    Post,
    PostEngagement,
    User,
    UserActivity,
)


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserModel(_ApiModel):
    """User payload."""

    id: str
    name: str
    post_count: int | None = Field(default=None, alias="postCount")

    @classmethod
    def from_user(cls, user: User) -> "UserModel":
        return cls(id=user.id, name=user.name)

    @classmethod
    def from_activity(cls, activity: UserActivity) -> "UserModel":
        return cls(
            id=activity.user.id,
            name=activity.user.name,
            post_count=activity.post_count,
        )


class PostModel(_ApiModel):
    """Post payload."""

    id: int
    user_id: int = Field(alias="userId")
    content: str
    comment_count: int | None = Field(default=None, alias="commentCount")

    @classmethod
    def from_post(cls, post: Post) -> "PostModel":
        return cls(id=post.id, user_id=post.user_id, content=post.content)

    @classmethod
    def from_engagement(cls, engagement: PostEngagement) -> "PostModel":
        return cls(
            id=engagement.post.id,
            user_id=engagement.post.user_id,
            content=engagement.post.content,
            comment_count=engagement.comment_count,
        )


class CommentModel(_ApiModel):
    """Comment payload."""

    id: int
    post_id: int = Field(alias="postId")
    content: str

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentModel":
        return cls(id=comment.id, post_id=comment.post_id, content=comment.content)


def dump(models: Sequence[BaseModel]) -> list[dict[str, object]]:
    """Serialize models with camelCase keys, leaving unset counts out."""
    return [model.model_dump(by_alias=True, exclude_none=True) for model in models]
