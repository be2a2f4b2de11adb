[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "activitysync"
version = "0.1.0"
description = "Event transforms and sync-folder discovery for activity tracking data"
requires-python = ">=3.10"
keywords = ["activity", "tracking", "events", "time-tracking", "transforms", "sync"]
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
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["activitysync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
