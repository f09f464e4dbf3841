[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyservers"
version = "0.1.0"
description = "Two small servers: a static-file HTTP server and a minimal Redis-like key/value server"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static files", "redis", "key-value", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Framework :: AsyncIO",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
tinyservers-http = "tinyservers.http_app:main"
tinyservers-redis = "tinyservers.redis_server:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyservers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
