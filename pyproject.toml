[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "distinst"
version = "0.1.0"
description = "Building blocks for Linux distribution installers: locales, ISO names, keyboard layouts, timezones, os-release and image extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["installer", "linux", "locale", "timezone", "keyboard", "squashfs", "os-release"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
distinst-locales = "distinst.locale_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["distinst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
