[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monitorkit"
version = "0.1.0"
description = "Monitor-style thread synchronization: semaphores, locks, condition variables, synchronized lists, a slot table, a bounded buffer, event barriers, an alarm clock and an elevator controller."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "synchronization",
    "semaphore",
    "condition-variable",
    "monitor",
    "event-barrier",
    "bounded-buffer",
    "elevator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-timeout",
]

[tool.hatch.build.targets.wheel]
packages = ["monitorkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
