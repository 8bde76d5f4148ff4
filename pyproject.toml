[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "externkit"
version = "0.1.0"
description = "Project management tool: per-project environment variables, a SQLite helper, pip bootstrapping and a small terminal text editor."
requires-python = ">=3.10"
keywords = ["project", "environment-variables", "sqlite", "pip", "editor", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Database",
    "Topic :: Text Editors",
]
dependencies = [
    "blessed",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
externkit = "externkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["externkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
