"""In-memory chat messages exchanged between pairs of users."""

from __future__ import annotations

import itertools
import re
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any

from douyinlite.models import Message, Response

MAX_CONTENT_BYTES = 500
_FIRST_MESSAGE_ID = 2
_INVALID_USER_ID = "Invalid user ID format"
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def gen_chat_key(user_id_a: int, user_id_b: int) -> str:
    """Return the key naming the conversation between two users, in either order."""
    low, high = sorted((user_id_a, user_id_b))
    return f"{low}_{high}"


def _parse_int64(text: str) -> int:
    if not _DECIMAL_INT.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"out of 64-bit range: {text!r}")
    return number


def _truncate(content: str) -> str:
    raw = content.encode("utf-8")
    if len(raw) <= MAX_CONTENT_BYTES:
        return content
    return raw[:MAX_CONTENT_BYTES].decode("utf-8", errors="ignore")


def _kitchen_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "PM" if moment.hour >= 12 else "AM"
    return f"{hour}:{moment.minute:02d}{suffix}"


class ChatStore:
    """Holds the messages of every conversation in memory."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._chats: dict[str, list[Message]] = {}
        self._ids = itertools.count(_FIRST_MESSAGE_ID)
        self._lock = threading.Lock()

    def send(self, user_id: int, to_user_id: int, content: str) -> Message:
        """Store a message from one user to another and return it."""
        key = gen_chat_key(user_id, to_user_id)
        with self._lock:
            message = Message(
                id=next(self._ids),
                content=_truncate(content),
                create_time=_kitchen_time(self._clock()),
            )
            self._chats.setdefault(key, []).append(message)
        return message

    def history(self, user_id: int, to_user_id: int) -> list[Message]:
        """Return the messages of a conversation, oldest first."""
        with self._lock:
            return list(self._chats.get(gen_chat_key(user_id, to_user_id), ()))

    def message_action(
        self, user_id: int, to_user_id: str, content: str
    ) -> tuple[int, dict[str, Any]]:
        """Handle a send request; return the HTTP status and response body."""
        try:
            target = _parse_int64(to_user_id)
        except ValueError:
            return 400, Response(1, _INVALID_USER_ID).to_dict()
        self.send(user_id, target, content)
        return 200, Response().to_dict()

    def message_chat(self, user_id: int, to_user_id: str) -> tuple[int, dict[str, Any]]:
        """Handle a history request; return the HTTP status and response body."""
        try:
            target = _parse_int64(to_user_id)
        except ValueError:
            return 400, Response(1, _INVALID_USER_ID).to_dict()
        with self._lock:
            messages = self._chats.get(gen_chat_key(user_id, target))
            listed = None if messages is None else [m.to_dict() for m in messages]
        body = Response().to_dict()
        body["message_list"] = listed
        return 200, body