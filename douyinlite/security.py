"""Security, CORS and rate-limit response headers."""

from __future__ import annotations

_SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; script-src 'self' 'unsafe-inline'; "
        "style-src 'self' 'unsafe-inline'; img-src 'self' data: https:; "
        "font-src 'self'; connect-src 'self'; frame-ancestors 'none';"
    ),
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=(), payment=()",
}

_NO_CACHE_PATHS = frozenset(
    {"/douyin/user/register/", "/douyin/user/login/", "/douyin/user/"}
)

_NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
}

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, Content-Type, Content-Length, Accept-Encoding, "
        "X-CSRF-Token, Authorization"
    ),
    "Access-Control-Expose-Headers": (
        "Content-Length, Access-Control-Allow-Origin, Access-Control-Allow-Headers"
    ),
    "Access-Control-Allow-Credentials": "true",
}

_RATE_LIMIT_HEADERS = {
    "X-Rate-Limit-Limit": "100",
    "X-Rate-Limit-Remaining": "99",
    "X-Rate-Limit-Reset": "60",
}

HEALTH_PATH = "/health"
PREFLIGHT_STATUS = 204


def security_headers(path: str) -> dict[str, str]:
    """Return the security headers for a response to the given path."""
    headers = dict(_SECURITY_HEADERS)
    if path in _NO_CACHE_PATHS:
        headers.update(_NO_CACHE_HEADERS)
    return headers


def cors_headers() -> dict[str, str]:
    """Return the cross-origin resource sharing headers."""
    return dict(_CORS_HEADERS)


def is_preflight(method: str) -> bool:
    """Tell whether a request method is a CORS preflight."""
    return method == "OPTIONS"


def rate_limit_headers() -> dict[str, str]:
    """Return the advisory rate-limit headers."""
    return dict(_RATE_LIMIT_HEADERS)


def health_check_response(path: str) -> tuple[int, dict] | None:
    """Return the status and body that hide the health endpoint, or None."""
    if path != HEALTH_PATH:
        return None
    return 404, {"status_code": 1, "status_msg": "Not found"}