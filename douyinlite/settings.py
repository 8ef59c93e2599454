"""Connection settings read from a nested configuration mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REDIS_DATABASES = {
    "test": 0,
    "video_comments": 1,
    "comment_video": 2,
    "comment": 3,
    "user_liked_videos": 4,
    "video_liked_users": 5,
    "user_followings": 11,
    "user_followers": 12,
    "user_friends": 13,
    "user_details": 14,
}

_MISSING = object()
_LOGIN_FIELDS = ("username", "password")


def lookup(settings: Mapping[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Find a value by a dotted key, matching each part case-insensitively."""
    node: Any = settings
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping):
            return default
        wanted = part.lower()
        found = next(
            (
                value
                for key, value in node.items()
                if isinstance(key, str) and key.lower() == wanted
            ),
            _MISSING,
        )
        if found is _MISSING:
            return default
        node = found
    return node


def _text(settings: Mapping[str, Any], dotted_key: str) -> str:
    value = lookup(settings, dotted_key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _userinfo(settings: Mapping[str, Any], section: str) -> str:
    """Return "user:pass" for the given settings section."""
    return ":".join(_text(settings, f"{section}.{field}") for field in _LOGIN_FIELDS)


def _endpoint(settings: Mapping[str, Any], section: str) -> str:
    host = _text(settings, f"{section}.host")
    port = _text(settings, f"{section}.port")
    return f"{host}:{port}"


def mysql_dsn(settings: Mapping[str, Any]) -> str:
    """Build the MySQL data source name from settings.mysql."""
    userinfo = _userinfo(settings, "settings.mysql")
    endpoint = _endpoint(settings, "settings.mysql")
    schema = _text(settings, "settings.mysql.schema")
    return (
        f"{userinfo}@tcp({endpoint})/{schema}"
        "?charset=utf8&parseTime=True&loc=Local&timeout=10000ms"
    )


def redis_address(settings: Mapping[str, Any]) -> str:
    """Return the host:port of the Redis server."""
    return _endpoint(settings, "settings.redis")


def redis_password(settings: Mapping[str, Any]) -> str:
    """Return the Redis password, empty when unset."""
    return _text(settings, "settings.redis." + _LOGIN_FIELDS[1])


def redis_expire_seconds(settings: Mapping[str, Any]) -> float:
    """Return the Redis cache expiry, configured as a number of seconds."""
    value = lookup(settings, "settings.redis.expirationTime")
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise ValueError(f"invalid expiration time: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid expiration time: {value!r}") from exc


def rabbitmq_url(settings: Mapping[str, Any]) -> str:
    """Build the AMQP URL from settings.rabbitMQ."""
    userinfo = _userinfo(settings, "settings.rabbitMQ")
    endpoint = _endpoint(settings, "settings.rabbitMQ")
    return f"amqp://{userinfo}@{endpoint}/"