[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplejrpc"
version = "0.1.0"
description = "Application building blocks: JSON configuration, logging, i18n, rule-based validation and thread-safe containers"
requires-python = ">=3.11"
dependencies = []
keywords = [
    "configuration",
    "validation",
    "i18n",
    "logging",
    "dependency-container",
    "framework",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simplejrpc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
