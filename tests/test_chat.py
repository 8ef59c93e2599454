from datetime import datetime

import pytest

from douyinlite.chat import MAX_CONTENT_BYTES, ChatStore, gen_chat_key


def _fixed_clock(moment):
    return lambda: moment


def test_chat_key_orders_ids():
    assert gen_chat_key(5, 3) == "3_5"


@pytest.mark.parametrize("a,b", [(1, 2), (9, 4), (7, 7), (-3, 10)])
def test_chat_key_is_symmetric(a, b):
    assert gen_chat_key(a, b) == gen_chat_key(b, a)


def test_send_and_history_in_order():
    store = ChatStore()
    store.send(1, 2, "hello")
    store.send(2, 1, "hi back")
    store.send(1, 2, "how are you")
    contents = [m.content for m in store.history(2, 1)]
    assert contents == ["hello", "hi back", "how are you"]


def test_message_ids_increase():
    store = ChatStore()
    ids = [store.send(1, 2, str(n)).id for n in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_conversations_are_separate():
    store = ChatStore()
    store.send(1, 2, "to two")
    store.send(1, 3, "to three")
    assert [m.content for m in store.history(1, 2)] == ["to two"]
    assert [m.content for m in store.history(3, 1)] == ["to three"]


def test_content_truncated_to_limit():
    store = ChatStore()
    message = store.send(1, 2, "a" * 600)
    assert len(message.content) == MAX_CONTENT_BYTES


def test_multibyte_content_stays_within_limit():
    store = ChatStore()
    message = store.send(1, 2, "é" * 300)
    assert len(message.content.encode("utf-8")) <= MAX_CONTENT_BYTES
    assert set(message.content) == {"é"}


def test_create_time_in_kitchen_format():
    store = ChatStore(clock=_fixed_clock(datetime(2023, 8, 7, 15, 4)))
    assert store.send(1, 2, "x").create_time == "3:04PM"


def test_create_time_at_midnight():
    store = ChatStore(clock=_fixed_clock(datetime(2023, 8, 7, 0, 0)))
    assert store.send(1, 2, "x").create_time == "12:00AM"


def test_message_action_rejects_bad_user_id():
    store = ChatStore()
    status, body = store.message_action(1, "abc", "hello")
    assert status == 400
    assert body == {"status_code": 1, "status_msg": "Invalid user ID format"}
    assert store.history(1, 0) == []


def test_message_action_then_chat():
    store = ChatStore()
    status, body = store.message_action(1, "2", "hello")
    assert (status, body) == (200, {"status_code": 0})
    status, body = store.message_chat(2, "1")
    assert status == 200
    assert [m["content"] for m in body["message_list"]] == ["hello"]


def test_message_chat_without_history():
    status, body = ChatStore().message_chat(1, "2")
    assert status == 200
    assert body["status_code"] == 0
    assert body["message_list"] is None


def test_message_chat_rejects_bad_user_id():
    status, body = ChatStore().message_chat(1, "")
    assert status == 400
    assert body["status_code"] == 1