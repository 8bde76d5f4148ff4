"""Project environment variables stored in a JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path

from externkit.project import ENV_FILE_NAME, PROJECT_DIR_NAME

DEFAULT_ENV_FILE = Path(PROJECT_DIR_NAME) / ENV_FILE_NAME

PathLike = "str | os.PathLike[str] | None"


class EnvVarError(Exception):
    """An environment variable operation was refused.

    ``warning`` is true when the refusal is about the variable's existence
    rather than about invalid input.
    """

    def __init__(self, message: str, *, warning: bool = False) -> None:
        super().__init__(message)
        self.warning = warning


def _resolve(path: str | os.PathLike[str] | None) -> Path:
    return DEFAULT_ENV_FILE if path is None else Path(path)


def load_env_vars(path: str | os.PathLike[str] | None = None) -> dict[str, str]:
    """Read the stored variables; a missing or malformed file yields an empty dict."""
    try:
        content = _resolve(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}
    if not content:
        return {}
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return {}
    if not isinstance(data, dict) or not all(
        isinstance(value, str) for value in data.values()
    ):
        return {}
    return data


def save_env_vars(
    env_vars: dict[str, str], path: str | os.PathLike[str] | None = None
) -> None:
    """Write the variables as pretty-printed JSON."""
    _resolve(path).write_text(json.dumps(env_vars, indent=2), encoding="utf-8")


def get(env_name: str, path: str | os.PathLike[str] | None = None) -> str | None:
    """Look a variable up in the process environment, then in the project file."""
    value = os.environ.get(env_name)
    if value is not None:
        return value
    return load_env_vars(path).get(env_name)


def add_env_var(
    name: str, value: str, path: str | os.PathLike[str] | None = None
) -> None:
    """Add a new variable; refuses existing names and empty input."""
    env_vars = load_env_vars(path)
    if name in env_vars:
        raise EnvVarError(
            f"Environment variable '{name}' already exists. "
            "Use 'update' to change its value.",
            warning=True,
        )
    if not name or not value:
        raise EnvVarError("Environment variable name and value cannot be empty.")
    env_vars[name] = value
    save_env_vars(env_vars, path)


def delete_env_var(name: str, path: str | os.PathLike[str] | None = None) -> None:
    """Remove an existing variable."""
    env_vars = load_env_vars(path)
    if name not in env_vars:
        raise EnvVarError(
            f"Environment variable '{name}' does not exist.", warning=True
        )
    if not name:
        raise EnvVarError("Environment variable name cannot be empty.")
    del env_vars[name]
    save_env_vars(env_vars, path)


def update_env_var(
    name: str, value: str, path: str | os.PathLike[str] | None = None
) -> None:
    """Change the value of an existing variable."""
    env_vars = load_env_vars(path)
    if name not in env_vars:
        raise EnvVarError(
            f"Environment variable '{name}' does not exist. Use 'add' to create it.",
            warning=True,
        )
    if not name or not value:
        raise EnvVarError("Environment variable name and value cannot be empty.")
    env_vars[name] = value
    save_env_vars(env_vars, path)