"""Rendering the editor state to a terminal."""

from __future__ import annotations

import sys
from typing import TextIO

from externkit.buffer import Editor

HELP_TEXT = "^X Exit  ^S Save  ^O Open  Arrow keys to move"
NEW_FILE_NAME = "New File"
MODIFIED_FLAG = "[Modified]"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE_END = "\x1b[K"
CLEAR_CURRENT_LINE = "\x1b[2K"
CURSOR_LEFT = "\x1b[1D"
CURSOR_MOVE = "\x1b[{row};{column}H"
RESET_STYLE = "\x1b[0m"
STATUS_STYLE = "\x1b[30m\x1b[47m"
HELP_STYLE = "\x1b[90m"


def _move_to(x: int, y: int) -> str:
    return CURSOR_MOVE.format(row=y + 1, column=x + 1)


def render_lines(editor: Editor) -> list[str]:
    """The text rows of the screen, each padded to the terminal width."""
    width = editor.terminal_width
    rows = max(editor.terminal_height - 2, 0)
    lines = []
    for index in range(editor.offset_y, editor.offset_y + rows):
        text = editor.content[index][:width] if index < len(editor.content) else "~"
        lines.append(text.ljust(width))
    return lines


def status_bar(editor: Editor) -> str:
    """The status line, truncated and padded to the terminal width."""
    name = editor.filename if editor.filename is not None else NEW_FILE_NAME
    flag = MODIFIED_FLAG if editor.modified else ""
    status = (
        f" {name} | Line {editor.cursor_y + 1}/{len(editor.content)}"
        f" | Col {editor.cursor_x + 1} {flag}"
    )
    return status[: editor.terminal_width].ljust(editor.terminal_width)


def help_bar(editor: Editor) -> str:
    """The key help line, truncated to the terminal width."""
    return HELP_TEXT[: editor.terminal_width]


def cursor_position(editor: Editor) -> tuple[int, int]:
    """The cursor's (column, row) on screen."""
    width = editor.terminal_width
    x = editor.cursor_x
    if x > 0 and width > 0 and x >= width:
        x = width - 1
    return x, editor.cursor_y - editor.offset_y


class Display:
    """Draws an editor onto a text stream using ANSI escape sequences."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def refresh_screen(self, editor: Editor) -> None:
        parts = [HIDE_CURSOR, _move_to(0, 0)]
        for line in render_lines(editor):
            parts += [line, CLEAR_LINE_END, "\r\n"]
        parts += [STATUS_STYLE, status_bar(editor), RESET_STYLE]
        parts += ["\r\n", HELP_STYLE, help_bar(editor), RESET_STYLE]
        parts += [_move_to(*cursor_position(editor)), SHOW_CURSOR]
        self.stream.write("".join(parts))
        self.stream.flush()