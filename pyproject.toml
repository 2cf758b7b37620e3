[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civoclient"
version = "0.1.0"
description = "Client library for the Civo cloud API: quotas, regions, volumes, snapshots, snapshot schedules, teams, roles, SSH keys and webhooks"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["civo", "cloud", "api", "client", "volumes", "snapshots", "webhooks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["civoclient"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
