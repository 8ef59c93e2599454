"""Request input validation and sanitising."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping

SKIPPED_PATHS = frozenset(
    {"/douyin/user/register/", "/douyin/user/login/", "/douyin/feed/"}
)

_SQL_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"(?i)(SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|ALTER|TRUNCATE|EXEC|UNION|JOIN)",
        r"(?i)(OR|AND|NOT|XOR)",
        r"(?i)(1=1|1=0)",
        r"(?i)(--)",
        r"(?i)(#)",
        r"(?i)(/*)",
    )
)

_XSS_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"<script.*?>.*?</script>",
        r"javascript:",
        r"onload=",
        r"onclick=",
        r"onerror=",
        r"<iframe",
        r"<object",
        r"<embed",
        r"<link",
    )
)

_PATH_TRAVERSAL = ("../", "..\\")
_COMMAND_CHARS = (";", "|", "&", "$", "`", "(", ")")
_COMMAND_CHECK_MIN_BYTES = 100

_SQL_STRIP = re.compile(
    r"(?i)(SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|ALTER|TRUNCATE|EXEC|UNION|JOIN"
    r"|OR|AND|NOT|XOR|--|#|/\*|\*/)"
)
_XSS_STRIP = re.compile(
    r"<script.*?>.*?</script>|javascript:|onload=|onclick=|onerror="
    r"|<iframe|<object|<embed|<link"
)
_HTML_ESCAPES = (("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "&#39;"))

_USERNAME = re.compile(r"[a-zA-Z0-9_]+")
_REGISTER_USERNAME = re.compile(r"[a-zA-Z0-9]{3,20}")
_LETTER = re.compile(r"[a-zA-Z]")
_DIGIT = re.compile(r"[0-9]")
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class InvalidInputError(ValueError):
    """A request parameter failed input validation."""

    status = 400

    def __init__(self, path: str, key: str, value: str) -> None:
        super().__init__(f"invalid input for {key!r} on {path}")
        self.path = path
        self.key = key
        self.value = value

    @property
    def body(self) -> dict:
        return {"status_code": 1, "status_msg": "Invalid input"}


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def is_valid_input(value: str) -> bool:
    """Tell whether a value is free of injection, XSS and traversal patterns."""
    if any(p.search(value) for p in _SQL_PATTERNS):
        return False
    if any(p.search(value) for p in _XSS_PATTERNS):
        return False
    if any(marker in value for marker in _PATH_TRAVERSAL):
        return False
    if _byte_len(value) > _COMMAND_CHECK_MIN_BYTES and any(
        ch in value for ch in _COMMAND_CHARS
    ):
        return False
    return True


def sanitize_input(value: str) -> str:
    """Strip SQL keywords and script fragments, then escape HTML characters."""
    value = _SQL_STRIP.sub("", value)
    value = _XSS_STRIP.sub("", value)
    for raw, escaped in _HTML_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def validate_user_id(user_id: str) -> bool:
    """Tell whether a user id is a signed 64-bit decimal of at most 10 chars."""
    if not _DECIMAL_INT.fullmatch(user_id):
        return False
    if not _INT64_MIN <= int(user_id) <= _INT64_MAX:
        return False
    return _byte_len(user_id) <= 10


def validate_username(username: str) -> bool:
    """Tell whether a username is 3-20 letters, digits or underscores."""
    if not 3 <= _byte_len(username) <= 20:
        return False
    return _USERNAME.fullmatch(username) is not None


def validate_register_username(username: str) -> bool:
    """Tell whether a registration username is 3-20 letters or digits."""
    return _REGISTER_USERNAME.fullmatch(username) is not None


def validate_password(password: str) -> bool:
    """Tell whether a password has 6+ characters with a letter and a digit."""
    if _byte_len(password) < 6:
        return False
    return bool(_LETTER.search(password)) and bool(_DIGIT.search(password))


def _pairs(params: Mapping[str, Iterable[str] | str]) -> Iterator[tuple[str, str]]:
    for key, values in params.items():
        if isinstance(values, str):
            values = (values,)
        for value in values:
            yield key, value


def check_request(
    path: str,
    query: Mapping[str, Iterable[str] | str],
    form: Mapping[str, Iterable[str] | str] | None = None,
) -> None:
    """Validate query and form values, raising InvalidInputError on the first bad one."""
    if path in SKIPPED_PATHS:
        return
    for params in (query, form):
        if not params:
            continue
        for key, value in _pairs(params):
            if not is_valid_input(value):
                raise InvalidInputError(path, key, value)