[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shulzcache"
version = "0.1.0"
description = "Thread-safe memoizing wrapper with LRU eviction, TTL expiry and per-key call deduplication"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "ttl", "memoize", "concurrency", "threading"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shulzcache-demo = "shulzcache.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["shulzcache"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
