"""The text buffer and cursor state of the terminal editor."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path


def _terminal_width() -> int:
    return shutil.get_terminal_size().columns


def _terminal_height() -> int:
    return shutil.get_terminal_size().lines


def _split_lines(content: str) -> list[str]:
    """Split text into lines, dropping one trailing newline and any ``\\r``."""
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Editor:
    """Lines of text, a cursor, a vertical scroll offset and the screen size."""

    content: list[str] = field(default_factory=lambda: [""])
    cursor_x: int = 0
    cursor_y: int = 0
    offset_y: int = 0
    filename: str | None = None
    modified: bool = False
    terminal_width: int = field(default_factory=_terminal_width)
    terminal_height: int = field(default_factory=_terminal_height)

    @classmethod
    def open_file(
        cls,
        filename: str | os.PathLike[str],
        width: int | None = None,
        height: int | None = None,
    ) -> "Editor":
        """Create an editor for ``filename``, loading it if it exists."""
        editor = cls(filename=os.fspath(filename))
        if width is not None:
            editor.terminal_width = width
        if height is not None:
            editor.terminal_height = height
        path = Path(filename)
        if path.exists():
            text = path.read_text(encoding="utf-8")
            editor.content = _split_lines(text) if text else [""]
        return editor

    @property
    def _line(self) -> str:
        return self.content[self.cursor_y]

    def clamp_cursor_x(self) -> None:
        """Keep the cursor within the current line."""
        self.cursor_x = min(self.cursor_x, len(self._line))

    def insert_char(self, c: str) -> None:
        line = self._line
        self.content[self.cursor_y] = line[: self.cursor_x] + c + line[self.cursor_x :]
        self.cursor_x += 1
        self.modified = True

    def insert_newline(self) -> None:
        line = self._line
        self.content[self.cursor_y] = line[: self.cursor_x]
        self.content.insert(self.cursor_y + 1, line[self.cursor_x :])
        self.cursor_y += 1
        self.cursor_x = 0
        self.modified = True

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at a line start."""
        if self.cursor_x > 0:
            line = self._line
            self.content[self.cursor_y] = line[: self.cursor_x - 1] + line[self.cursor_x :]
            self.cursor_x -= 1
            self.modified = True
        elif self.cursor_y > 0:
            current = self.content.pop(self.cursor_y)
            self.cursor_y -= 1
            self.cursor_x = len(self._line)
            self.content[self.cursor_y] += current
            self.modified = True

    def delete_char_forward(self) -> None:
        """Delete the character under the cursor, joining lines at a line end."""
        line = self._line
        if self.cursor_x < len(line):
            self.content[self.cursor_y] = line[: self.cursor_x] + line[self.cursor_x + 1 :]
            self.modified = True
        elif self.cursor_y < len(self.content) - 1:
            self.content[self.cursor_y] += self.content.pop(self.cursor_y + 1)
            self.modified = True

    def move_cursor_up(self) -> None:
        if self.cursor_y > 0:
            self.cursor_y -= 1
            self.offset_y = min(self.offset_y, self.cursor_y)
            self.clamp_cursor_x()

    def move_cursor_down(self) -> None:
        if self.cursor_y < len(self.content) - 1:
            self.cursor_y += 1
            height = self.terminal_height
            if height > 2 and self.cursor_y >= self.offset_y + height - 2:
                self.offset_y = max(self.cursor_y - (height - 3), 0)
            self.clamp_cursor_x()

    def move_cursor_left(self) -> None:
        if self.cursor_x > 0:
            self.cursor_x -= 1
        elif self.cursor_y > 0:
            self.cursor_y -= 1
            self.cursor_x = len(self._line)

    def move_cursor_right(self) -> None:
        if self.cursor_x < len(self._line):
            self.cursor_x += 1
        elif self.cursor_y < len(self.content) - 1:
            self.cursor_y += 1
            self.cursor_x = 0

    def move_home(self) -> None:
        self.cursor_x = 0

    def move_end(self) -> None:
        if self.cursor_y < len(self.content):
            self.cursor_x = len(self._line)

    def text(self) -> str:
        """The buffer as it is written to disk."""
        return "\n".join(self.content)