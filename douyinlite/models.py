"""Response objects exchanged with clients, and demo data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _without_empty(items: dict[str, Any], keep: tuple[str, ...] = ()) -> dict[str, Any]:
    return {key: value for key, value in items.items() if value or key in keep}


@dataclass(frozen=True)
class Response:
    """Status part common to every API response."""

    status_code: int = 0
    status_msg: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {"status_code": self.status_code, "status_msg": self.status_msg},
            keep=("status_code",),
        )


@dataclass(frozen=True)
class User:
    id: int = 0
    name: str = ""
    follow_count: int = 0
    follower_count: int = 0
    is_follow: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "id": self.id,
                "name": self.name,
                "follow_count": self.follow_count,
                "follower_count": self.follower_count,
                "is_follow": self.is_follow,
            }
        )


@dataclass(frozen=True)
class Video:
    id: int = 0
    author: User = field(default_factory=User)
    play_url: str = ""
    cover_url: str = ""
    favorite_count: int = 0
    comment_count: int = 0
    is_favorite: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "id": self.id,
                "author": self.author.to_dict(),
                "play_url": self.play_url,
                "cover_url": self.cover_url,
                "favorite_count": self.favorite_count,
                "comment_count": self.comment_count,
                "is_favorite": self.is_favorite,
            },
            keep=("author", "play_url"),
        )


@dataclass(frozen=True)
class Comment:
    id: int = 0
    user: User = field(default_factory=User)
    content: str = ""
    create_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "id": self.id,
                "user": self.user.to_dict(),
                "content": self.content,
                "create_date": self.create_date,
            },
            keep=("user",),
        )


@dataclass(frozen=True)
class Message:
    id: int = 0
    content: str = ""
    create_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {"id": self.id, "content": self.content, "create_time": self.create_time}
        )


@dataclass(frozen=True)
class MessageSendEvent:
    user_id: int = 0
    to_user_id: int = 0
    msg_content: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "user_id": self.user_id,
                "to_user_id": self.to_user_id,
                "msg_content": self.msg_content,
            }
        )


@dataclass(frozen=True)
class MessagePushEvent:
    from_user_id: int = 0
    msg_content: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {"user_id": self.from_user_id, "msg_content": self.msg_content}
        )


DEMO_USER = User(id=1, name="TestUser")

DEMO_VIDEOS = (
    Video(
        id=1,
        author=DEMO_USER,
        play_url="https://media.example.com/movie.mp4",
        cover_url="https://media.example.com/bear.jpg",
    ),
)

DEMO_COMMENTS = (
    Comment(id=1, user=DEMO_USER, content="Test Comment", create_date="05-01"),
)