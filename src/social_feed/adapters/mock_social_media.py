"""Canned social media data served in place of the upstream API."""

import copy
from dataclasses import dataclass, field

from social_feed.adapters.social_media_client import SocialMediaSource

MOCK_USERS: dict[str, str] = {
    "1": "John Doe",
    "2": "Jane Doe",
    "3": "Alice Smith",
    "4": "Bob Johnson",
    "5": "Charlie Brown",
    "10": "Helen Moore",
    "11": "Ivy Taylor",
    "12": "Jack Anderson",
    "13": "Kathy Thomas",
    "14": "Liam Jackson",
    "15": "Mona Harris",
    "16": "Nathan Clark",
    "17": "Olivia Lewis",
    "18": "Paul Walker",
    "19": "Quinn Scott",
    "20": "Rachel Young",
}

MOCK_POSTS: dict[str, list[dict[str, object]]] = {
    "1": [
        {"id": 246, "userid": 1, "content": "Post about ant"},
        {"id": 161, "userid": 1, "content": "Post about elephant"},
        {"id": 150, "userid": 1, "content": "Post about dinosaurs"},
    ],
    "2": [
        {"id": 247, "userid": 2, "content": "My first day at work"},
        {"id": 248, "userid": 2, "content": "The sunset was beautiful today"},
    ],
    "3": [
        {"id": 249, "userid": 3, "content": "My favorite recipe"},
    ],
}

MOCK_COMMENTS: dict[str, list[dict[str, object]]] = {
    "246": [
        {"id": 1001, "postid": 246, "content": "Great observation about ants!"},
        {
            "id": 1002,
            "postid": 246,
            "content": "I disagree, ants are not that interesting.",
        },
    ],
    "161": [
        {"id": 1003, "postid": 161, "content": "Elephants are magnificent creatures!"},
    ],
    "247": [
        {"id": 1004, "postid": 247, "content": "How was it?"},
        {"id": 1005, "postid": 247, "content": "Congratulations on your new job!"},
    ],
}


@dataclass
class MockSocialMediaSource(SocialMediaSource):
    """Serves payloads shaped like the upstream API from in-memory tables."""

    users: dict[str, str] = field(default_factory=lambda: dict(MOCK_USERS))
    posts: dict[str, list[dict[str, object]]] = field(
        default_factory=lambda: copy.deepcopy(MOCK_POSTS)
    )
    comments: dict[str, list[dict[str, object]]] = field(
        default_factory=lambda: copy.deepcopy(MOCK_COMMENTS)
    )

    async def fetch_users(self) -> dict[str, object]:
        return {"users": dict(self.users)}

    async def fetch_user_posts(self, user_id: str) -> dict[str, object]:
        return {"posts": list(self.posts.get(str(user_id), []))}

    async def fetch_post_comments(self, post_id: int) -> dict[str, object]:
        return {"comments": list(self.comments.get(str(post_id), []))}

    async def close(self) -> None:
        return None
