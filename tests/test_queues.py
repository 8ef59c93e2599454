import pytest

from douyinlite.config import DbOperation
from douyinlite.queues import (
    MAX_ATTEMPTS,
    FollowTask,
    consume_comment_del,
    consume_follow_add,
    consume_follow_del,
    format_follow_message,
    parse_comment_message,
    parse_follow_message,
    run_with_retries,
)


def test_follow_message_round_trip():
    body = format_follow_message(12, 34, DbOperation.INSERT)
    assert parse_follow_message(body) == FollowTask(12, 34, "insert")


def test_follow_message_from_bytes():
    body = format_follow_message(5, 6, DbOperation.UPDATE).encode()
    assert parse_follow_message(body) == FollowTask(5, 6, "update")


def test_follow_message_needs_three_fields():
    with pytest.raises(ValueError):
        parse_follow_message("1-2")


def test_follow_message_bad_ids_become_zero():
    task = parse_follow_message("x-y-update")
    assert (task.user_id, task.target_id) == (0, 0)


def test_comment_message():
    assert parse_comment_message("42") == 42
    assert parse_comment_message(b"7") == 7
    assert parse_comment_message("nope") == 0


def test_retries_until_success():
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise RuntimeError("down")

    assert run_with_retries(flaky) is True
    assert len(calls) == 3


def test_retries_give_up():
    calls = []

    def broken():
        calls.append(1)
        raise RuntimeError("down")

    assert run_with_retries(broken) is False
    assert len(calls) == MAX_ATTEMPTS


def test_consume_follow_add():
    inserted, updated = [], []
    messages = [
        format_follow_message(1, 2, DbOperation.INSERT),
        format_follow_message(3, 4, DbOperation.UPDATE),
    ]
    results = consume_follow_add(
        messages,
        lambda u, t: inserted.append((u, t)),
        lambda u, t, flag: updated.append((u, t, flag)),
    )
    assert results == [True, True]
    assert inserted == [(1, 2)]
    assert updated == [(3, 4, 1)]


def test_consume_follow_del():
    updated = []
    messages = [
        format_follow_message(1, 2, DbOperation.UPDATE),
        format_follow_message(5, 6, DbOperation.INSERT),
    ]
    results = consume_follow_del(messages, lambda u, t, flag: updated.append((u, t, flag)))
    assert results == [True, True]
    assert updated == [(1, 2, 0)]


def test_consume_comment_del_reports_failures():
    deleted = []

    def delete(comment_id):
        if comment_id == 9:
            raise RuntimeError("locked")
        deleted.append(comment_id)

    results = consume_comment_del([b"8", "9", "10"], delete)
    assert results == [True, False, True]
    assert deleted == [8, 10]