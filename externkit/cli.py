"""Command-line entry point for project management."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from termcolor import colored

from externkit import env, python_tools
from externkit.project import PROJECT_DIR_NAME, init_project

VERSION = "0.1.0"
NOT_INITIALIZED = (
    "Project not initialized. Use the `externkit init` command to set up the project."
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="externkit",
        description="General project management tool.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"externkit {VERSION}"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    env_parser = commands.add_parser(
        "env", help="Environment variables management commands"
    )
    env_commands = env_parser.add_subparsers(dest="env_command", metavar="COMMAND")
    env_commands.required = True

    add = env_commands.add_parser("add", help="Add or set an environment variable")
    add.add_argument("key", help="Environment variable name")
    add.add_argument("value", help="Environment variable value")

    delete = env_commands.add_parser("delete", help="Delete an environment variable")
    delete.add_argument("key", help="Environment variable name to delete")

    update = env_commands.add_parser(
        "update", help="Update an existing environment variable"
    )
    update.add_argument("key", help="Environment variable name")
    update.add_argument("value", help="New environment variable value")

    commands.add_parser("init", help="Initialize the externkit project")

    get_pip = commands.add_parser("get_pip", help="Fetch and run get-pip.py script")
    get_pip.add_argument(
        "--python-path",
        dest="python_path",
        default="python",
        help="The python executable to use",
    )

    edit = commands.add_parser("edit", help="Open the nano-like text editor")
    edit.add_argument("file", nargs="?", default=None, help="File to edit")

    return parser


def handle_env_command(args: argparse.Namespace) -> bool:
    """Run an ``env`` subcommand, printing the outcome; return whether it succeeded."""
    try:
        if args.env_command == "add":
            env.add_env_var(args.key, args.value)
            message = f"Added environment variable: {args.key}={args.value}"
        elif args.env_command == "delete":
            env.delete_env_var(args.key)
            message = f"Deleted environment variable: {args.key}"
        elif args.env_command == "update":
            env.update_env_var(args.key, args.value)
            message = f"Updated environment variable: {args.key}={args.value}"
        else:
            raise ValueError(f"unknown env command: {args.env_command!r}")
    except env.EnvVarError as exc:
        print(colored(str(exc), "yellow" if exc.warning else "red"))
        return False
    print(colored(message, "green"))
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    parser = build_parser()
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments:
        parser.print_help(sys.stderr)
        return 2
    args = parser.parse_args(arguments)

    if args.command == "init":
        init_project()
        return 0
    if args.command == "get_pip":
        python_tools.get_pip(args.python_path)
        return 0
    if args.command == "edit":
        from externkit.session import start_editor

        try:
            start_editor(args.file)
        except OSError as exc:
            print(f"Editor error: {exc}", file=sys.stderr)
        return 0

    if not Path(PROJECT_DIR_NAME).exists():
        print(colored(NOT_INITIALIZED, "red"))
        return 0

    handle_env_command(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())