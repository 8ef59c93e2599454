# douyinlite

The request-handling core of a minimal short-video service. It is plain
Python with no runtime dependencies: no web framework, database or
message broker is attached.

## Modules

- `douyinlite.config`
  - `DbOperation` is a string enum of database operation names:
    `insert`, `update`, `delete` and `search`.
  - `generate_secure_jwt_secret()` returns 32 random bytes, URL-safe
    base64 encoded.
  - `is_secure_jwt_secret(secret_key)` returns False for the weak
    default `123456` and for any secret shorter than 32 bytes.
- `douyinlite.validation`
  - `is_valid_input(value)` checks a value against SQL, XSS and
    path-traversal patterns. Values longer than 100 bytes are also
    checked for shell characters.
  - `sanitize_input(value)` removes SQL keywords and script fragments,
    then escapes `<`, `>`, `"` and `'`.
  - `validate_user_id`, `validate_username`,
    `validate_register_username` and `validate_password` check
    individual fields.
  - `check_request(path, query, form)` runs `is_valid_input` on every
    query and form value. On the first bad value it raises
    `InvalidInputError`, which carries `status` 400 and a JSON `body`.
    The register, login and feed paths are not checked.
  - Note: one of the SQL patterns, `(/*)`, matches the empty string.
    As a result, `is_valid_input` returns False for every value, and
    `check_request` raises for any checked path that has at least one
    parameter.
- `douyinlite.security`
  - `security_headers(path)` returns the security headers. For the
    register, login and user paths it also returns no-cache headers.
  - `cors_headers()` and `rate_limit_headers()` return fixed header
    sets.
  - `is_preflight(method)` is true for `OPTIONS`.
  - `health_check_response(path)` returns `(404, body)` for `/health`
    and `None` for any other path.
- `douyinlite.models`
  - The frozen records `Response`, `User`, `Video`, `Comment`,
    `Message`, `MessageSendEvent` and `MessagePushEvent`.
  - Each record's `to_dict()` gives its JSON shape and leaves out
    empty fields, as the API does.
  - Demo data: `DEMO_USER`, `DEMO_VIDEOS` and `DEMO_COMMENTS`.
- `douyinlite.chat`
  - `gen_chat_key(a, b)` names a conversation between two users. The
    key is the same in either order.
  - `ChatStore` keeps messages in memory and is thread-safe.
    - `send(user_id, to_user_id, content)` stores a message and returns
      it. The content is cut to 500 bytes, and the time is stamped in
      the `3:04PM` style.
    - `history(user_id, to_user_id)` returns the messages, oldest
      first.
    - `message_action` and `message_chat` take the target id as text
      and return an `(http_status, body)` pair. If the id is not a
      valid integer, they return status 400.
- `douyinlite.settings`
  - `lookup(settings, dotted_key, default)` reads a nested mapping.
    Each part of the key is matched without regard to case.
  - `mysql_dsn`, `redis_address`, `redis_password`,
    `redis_expire_seconds` and `rabbitmq_url` build connection details
    from the `settings.mysql`, `settings.redis` and
    `settings.rabbitMQ` sections.
  - `REDIS_DATABASES` lists the Redis database number used for each
    cache.
- `douyinlite.ratelimit`
  - `RateLimiter(limit)` counts requests per IP in one-second buckets.
    Each counter expires after 60 seconds.
  - `hit(ip, now)` returns the current count.
  - `check(ip, now)` raises `RateLimitExceeded` once the count exceeds
    the limit. The exception carries `status` 429.
- `douyinlite.queues`
  - `FollowTask` holds one follow change, which
    `parse_follow_message` and `format_follow_message` read and write
    as `user-target-operation` message bodies.
  - `parse_comment_message` reads a comment id from a message body.
  - `run_with_retries(action, attempts)` calls an action until it
    stops raising, up to 10 times by default.
  - `consume_follow_add`, `consume_follow_del` and
    `consume_comment_del` apply messages through callables that you
    supply. Each returns a list with one success flag per message.

## Example

```python
from douyinlite.chat import ChatStore
from douyinlite.ratelimit import RateLimiter, RateLimitExceeded

store = ChatStore()
store.send(1, 2, "hello")
print([m.content for m in store.history(2, 1)])   # ['hello']

limiter = RateLimiter(limit=2)
limiter.check("10.0.0.1", now=100.0)
limiter.check("10.0.0.1", now=100.5)
try:
    limiter.check("10.0.0.1", now=100.9)
except RateLimitExceeded as exc:
    print(exc.status, exc.body)                    # 429 {...}
```

## What this package does not do

The package does not do the following:

- It does not run an HTTP server or route requests.
- It does not sign or verify JWT tokens.
- It does not store users, videos, comments or likes.
- It does not connect to MySQL, Redis or RabbitMQ. The settings
  functions only build connection strings, and the queue consumers
  only call the storage functions you pass to them.

## Running the tests

```
pip install -e .[test]
pytest
```