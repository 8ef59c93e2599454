[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "douyinlite"
version = "0.1.0"
description = "Request-handling core of a minimal short-video service: input validation, security headers, response records, chat store, settings, rate limiting and queue message handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["short-video", "validation", "rate-limit", "chat", "http", "middleware", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["douyinlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
