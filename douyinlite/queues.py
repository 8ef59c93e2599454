"""Message formats and consumers for the follow and comment work queues."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from douyinlite.config import DbOperation

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10
FOLLOW_ADD_QUEUE = "follow_add"
FOLLOW_DEL_QUEUE = "follow_del"
COMMENT_QUEUE = "comment_queue"
COMMENT_EXCHANGE = "comment_exchange"
COMMENT_KEY = "comment_key"

Body = bytes | str


@dataclass(frozen=True)
class FollowTask:
    """A follow-relation change carried by a queued message."""

    user_id: int
    target_id: int
    operation: str


def _text(body: Body) -> str:
    return body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body


def _int_or_zero(text: str) -> int:
    try:
        return int(text.strip() if text != text.strip() else text)
    except ValueError:
        return 0


def parse_follow_message(body: Body) -> FollowTask:
    """Parse a "user-target-operation" message; unparsable ids become 0."""
    parts = _text(body).split("-")
    if len(parts) < 3:
        raise ValueError(f"follow message needs three fields: {body!r}")
    return FollowTask(_int_or_zero(parts[0]), _int_or_zero(parts[1]), parts[2])


def format_follow_message(user_id: int, target_id: int, operation: DbOperation | str) -> str:
    """Build the message body describing a follow-relation change."""
    op = operation.value if isinstance(operation, DbOperation) else str(operation)
    return f"{user_id}-{target_id}-{op}"


def parse_comment_message(body: Body) -> int:
    """Parse a comment id message; an unparsable id becomes 0."""
    return _int_or_zero(_text(body))


def run_with_retries(action: Callable[[], object], attempts: int = MAX_ATTEMPTS) -> bool:
    """Call action until it does not raise, at most attempts times."""
    for attempt in range(1, attempts + 1):
        try:
            action()
        except Exception:
            logger.warning("attempt %d of %d failed", attempt, attempts, exc_info=True)
            continue
        return True
    return False


def consume_follow_add(
    messages: Iterable[Body],
    insert: Callable[[int, int], object],
    update: Callable[[int, int, int], object],
) -> list[bool]:
    """Apply follow messages: insert new relations or re-enable existing ones."""
    results = []
    for body in messages:
        task = parse_follow_message(body)
        logger.info("follow add task: %s", task)
        if task.operation == DbOperation.INSERT.value:
            done = run_with_retries(lambda: insert(task.user_id, task.target_id))
        elif task.operation == DbOperation.UPDATE.value:
            done = run_with_retries(lambda: update(task.user_id, task.target_id, 1))
        else:
            done = True
        results.append(done)
    return results


def consume_follow_del(
    messages: Iterable[Body],
    update: Callable[[int, int, int], object],
) -> list[bool]:
    """Apply unfollow messages by disabling the relation."""
    results = []
    for body in messages:
        task = parse_follow_message(body)
        logger.info("follow del task: %s", task)
        if task.operation == DbOperation.UPDATE.value:
            done = run_with_retries(lambda: update(task.user_id, task.target_id, 0))
        else:
            done = True
        results.append(done)
    return results


def consume_comment_del(
    messages: Iterable[Body],
    delete: Callable[[int], object],
) -> list[bool]:
    """Delete each comment named by a message."""
    results = []
    for body in messages:
        comment_id = parse_comment_message(body)
        logger.info("comment delete task: %d", comment_id)
        results.append(run_with_retries(lambda: delete(comment_id)))
    return results