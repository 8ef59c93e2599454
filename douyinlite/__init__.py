"""Request-handling core of a minimal short-video service: validation, security headers, records, chat, settings, rate limiting and queues."""

__version__ = "0.1.0"