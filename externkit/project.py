"""Project directory layout and initialisation."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_DIR_NAME = ".externkit"
ENV_FILE_NAME = "environment_variables.json"
GITIGNORE_CONTENT = "*"
EMPTY_ENV_CONTENT = "{\n}"


def init_project(root: str | os.PathLike[str] = ".") -> Path:
    """Create the project directory under ``root`` unless it already exists.

    Returns the path of the project directory. An existing directory is
    left untouched.
    """
    project = Path(root) / PROJECT_DIR_NAME
    if not project.exists():
        project.mkdir(parents=True)
        (project / ".gitignore").write_text(GITIGNORE_CONTENT, encoding="utf-8")
        (project / ENV_FILE_NAME).write_text(EMPTY_ENV_CONTENT, encoding="utf-8")
    return project