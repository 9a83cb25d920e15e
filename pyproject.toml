[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatchpoll"
version = "1.18.0"
description = "Portable stat-based file change monitor with a session API, event flags and path filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "monitor", "watch", "poll", "file-changes", "events"]
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
    "Topic :: System :: Filesystems",
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswatchpoll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
