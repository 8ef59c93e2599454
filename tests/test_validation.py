import pytest

from douyinlite.validation import (
    SKIPPED_PATHS,
    InvalidInputError,
    check_request,
    is_valid_input,
    sanitize_input,
    validate_password,
    validate_register_username,
    validate_user_id,
    validate_username,
)


@pytest.mark.parametrize(
    "value",
    [
        "'; DROP TABLE comments; --",
        "SELECT * FROM users",
        "1=1",
        "a#b",
        "<script>alert('xss')</script>",
        "../etc",
    ],
)
def test_malicious_input_is_rejected(value):
    assert is_valid_input(value) is False


@pytest.mark.parametrize("value", ["", "hello", "12345", "Great video"])
def test_slash_star_pattern_matches_every_input(value):
    # The "/*" pattern matches the empty string, so nothing passes.
    assert is_valid_input(value) is False


def test_sanitize_escapes_html_characters():
    result = sanitize_input('This is <b>bold</b> "x" \'y\'')
    for raw in "<>\"'":
        assert raw not in result
    assert "&lt;" in result and "&gt;" in result


def test_sanitize_removes_sql_keywords():
    result = sanitize_input("SELECT 1 union 2")
    assert "select" not in result.lower()
    assert "union" not in result.lower()


def test_sanitize_removes_script_block():
    assert sanitize_input("<script>alert(1)</script>") == ""


def test_sanitize_is_stable_on_escaped_text():
    once = sanitize_input("12 < 13")
    assert sanitize_input(once) == once


@pytest.mark.parametrize(
    "user_id, expected",
    [
        ("123", True),
        ("-5", True),
        ("+7", True),
        ("12345678901", False),
        ("abc", False),
        ("", False),
        ("1_000", False),
        ("99999999999999999999", False),
    ],
)
def test_validate_user_id(user_id, expected):
    assert validate_user_id(user_id) is expected


@pytest.mark.parametrize(
    "username, expected",
    [
        ("ab", False),
        ("abc", True),
        ("user_name", True),
        ("u" * 20, True),
        ("u" * 21, False),
        ("bad name", False),
        ("abc\n", False),
    ],
)
def test_validate_username(username, expected):
    assert validate_username(username) is expected


@pytest.mark.parametrize(
    "username, expected",
    [("abc123", True), ("user_name", False), ("ab", False), ("u" * 21, False)],
)
def test_validate_register_username(username, expected):
    assert validate_register_username(username) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [("abc12", False), ("abcdef", False), ("123456", False), ("abc123", True)],
)
def test_validate_password(candidate, expected):
    assert validate_password(candidate) is expected


def test_check_request_skips_listed_paths_but_not_others():
    query = {"q": ["SELECT"]}
    for path in SKIPPED_PATHS:
        check_request(path, query, None)
    with pytest.raises(InvalidInputError) as info:
        check_request("/douyin/comment/list/", query, None)
    assert info.value.key == "q"
    assert info.value.value == "SELECT"


def test_check_request_reports_status_and_body():
    with pytest.raises(InvalidInputError) as info:
        check_request("/douyin/comment/list/", {"video_id": "1"}, None)
    assert info.value.status == 400
    assert info.value.body == {"status_code": 1, "status_msg": "Invalid input"}


def test_check_request_checks_query_before_form():
    with pytest.raises(InvalidInputError) as info:
        check_request("/douyin/x/", {"a": ["1"]}, {"b": ["2"]})
    assert info.value.key == "a"


def test_check_request_checks_form_values():
    check_request("/douyin/x/", {}, None)
    with pytest.raises(InvalidInputError) as info:
        check_request("/douyin/x/", {}, {"comment_text": ["hi"]})
    assert info.value.key == "comment_text"