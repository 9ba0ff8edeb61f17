[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auralib"
version = "0.1.0"
description = "Application building blocks: password-protected credential stores, password strength, logging, processes, environment, a web client and gettext helpers."
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = [
    "keyring",
    "credentials",
    "password-strength",
    "logging",
    "process",
    "gettext",
    "application-framework",
]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["auralib"]

[tool.hatch.build.targets.sdist]
include = [
    "auralib",
    "tests",
]

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
warn_redundant_casts = true
