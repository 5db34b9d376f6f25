"""Social media domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user of the social media platform."""

    id: str
    name: str


@dataclass(frozen=True)
class Post:
    """A post written by a user."""

    id: int
    user_id: int
    content: str


@dataclass(frozen=True)
class Comment:
    """A comment left on a post."""

    id: int
    post_id: int
    content: str


@dataclass(frozen=True)
class UserActivity:
    """A user together with the number of posts they wrote."""

    user: User
    post_count: int


@dataclass(frozen=True)
class PostEngagement:
    """A post together with the number of comments it received."""

    post: Post
    comment_count: int
