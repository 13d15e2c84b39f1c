[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readypoll"
version = "0.1.0"
description = "Readiness interests, events and event-source registration primitives for non-blocking I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["poll", "readiness", "events", "non-blocking", "io", "selector"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["readypoll"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
