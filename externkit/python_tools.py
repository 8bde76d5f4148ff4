"""Installing pip into a Python interpreter."""

from __future__ import annotations

import subprocess
import urllib.request
from pathlib import Path

from termcolor import colored

GET_PIP_URL = "https://bootstrap.pypa.io/get-pip.py"
TEMP_SCRIPT = "get_pip_temp.py"


def fetch_get_pip(url: str = GET_PIP_URL) -> str:
    """Download the pip bootstrap script and return its text."""
    with urllib.request.urlopen(url) as response:
        return response.read().decode("utf-8")


def get_pip(python_path: str = "python") -> bool:
    """Download the bootstrap script and run it with ``python_path``.

    Returns whether the interpreter reported success.
    """
    print(colored("Downloading get-pip.py...", "cyan"))
    script = fetch_get_pip()

    print(colored("Writing temporary file...", "cyan"))
    temp = Path(TEMP_SCRIPT)
    temp.write_text(script, encoding="utf-8")

    print(colored("Installing pip using:", "cyan"), colored(python_path, "yellow"))
    try:
        result = subprocess.run([python_path, TEMP_SCRIPT], check=False)
    finally:
        temp.unlink()

    if result.returncode == 0:
        print(colored("✓ pip installed successfully!", "green", attrs=["bold"]))
        return True
    print(colored("✗ Failed to install pip", "red", attrs=["bold"]))
    return False