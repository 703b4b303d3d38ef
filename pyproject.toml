[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonval"
version = "0.1.0"
description = "JSON value model with insertion-ordered objects, a flag-driven encoder and structured errors"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "encoder", "serialization", "json-value"]
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
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonval"]

[tool.hatch.build.targets.sdist]
include = ["jsonval", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
