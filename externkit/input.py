"""Key handling for the terminal editor."""

from __future__ import annotations

import dataclasses
import sys
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import TextIO

from externkit.buffer import Editor
from externkit.display import CLEAR_CURRENT_LINE, CURSOR_LEFT, CURSOR_MOVE

SAVE_PROMPT = "Save modified buffer? (y/n): "
FILENAME_PROMPT = "File name to write: "


class KeyCode(Enum):
    CHAR = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    ENTER = auto()
    BACKSPACE = auto()
    DELETE = auto()
    TAB = auto()
    ESC = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Key:
    """A key press: a code, the character for ``CHAR`` keys, and modifiers."""

    code: KeyCode
    char: str | None = None
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


def _is_control(c: str) -> bool:
    return unicodedata.category(c) == "Cc"


class InputHandler:
    """Applies key presses to an editor, prompting on ``stream`` when needed."""

    def __init__(self, read_key: Callable[[], Key], stream: TextIO | None = None) -> None:
        self.read_key = read_key
        self.stream = stream if stream is not None else sys.stdout

    def process_key(self, editor: Editor, key: Key) -> bool:
        """Handle one key press; return True when the editor should exit."""
        if key.code is KeyCode.CHAR and key.ctrl and not (key.alt or key.shift):
            if key.char == "x":
                if editor.modified and self.prompt_save(editor):
                    self.save_file(editor)
                return True
            if key.char == "s":
                self.save_file(editor)
                return False
            if key.char == "o":
                filename = self.prompt_filename(editor)
                if filename is not None:
                    opened = Editor.open_file(
                        filename, editor.terminal_width, editor.terminal_height
                    )
                    for f in dataclasses.fields(editor):
                        setattr(editor, f.name, getattr(opened, f.name))
                return False

        actions = {
            KeyCode.UP: editor.move_cursor_up,
            KeyCode.DOWN: editor.move_cursor_down,
            KeyCode.LEFT: editor.move_cursor_left,
            KeyCode.RIGHT: editor.move_cursor_right,
            KeyCode.HOME: editor.move_home,
            KeyCode.END: editor.move_end,
            KeyCode.ENTER: editor.insert_newline,
            KeyCode.BACKSPACE: editor.delete_char,
            KeyCode.DELETE: editor.delete_char_forward,
            KeyCode.TAB: lambda: editor.insert_char("\t"),
        }
        action = actions.get(key.code)
        if action is not None:
            action()
        elif (
            key.code is KeyCode.CHAR
            and key.char
            and not (key.ctrl or key.alt)
            and not _is_control(key.char)
        ):
            editor.insert_char(key.char)
        return False

    def save_file(self, editor: Editor) -> bool:
        """Write the buffer, asking for a name if it has none.

        Returns False when the user cancelled the name prompt.
        """
        filename = editor.filename
        if filename is None:
            filename = self.prompt_filename(editor)
            if filename is None:
                return False
            editor.filename = filename
        Path(filename).write_text(editor.text(), encoding="utf-8")
        editor.modified = False
        return True

    def _show_prompt(self, editor: Editor, prompt: str) -> None:
        row = max(editor.terminal_height - 1, 0)
        self.stream.write(CURSOR_MOVE.format(row=row + 1, column=1))
        self.stream.write(CLEAR_CURRENT_LINE + prompt)
        self.stream.flush()

    def prompt_save(self, editor: Editor) -> bool:
        """Ask whether to save; answers are y/Y, n/N or Esc."""
        self._show_prompt(editor, SAVE_PROMPT)
        while True:
            key = self.read_key()
            if key.code is KeyCode.ESC:
                return False
            if key.code is KeyCode.CHAR:
                if key.char in ("y", "Y"):
                    return True
                if key.char in ("n", "N"):
                    return False

    def prompt_filename(self, editor: Editor) -> str | None:
        """Read a file name; None when cancelled or left empty."""
        self._show_prompt(editor, FILENAME_PROMPT)
        chars: list[str] = []
        while True:
            key = self.read_key()
            if key.code is KeyCode.ENTER:
                return "".join(chars) or None
            if key.code is KeyCode.ESC:
                return None
            if key.code is KeyCode.BACKSPACE:
                if chars:
                    chars.pop()
                    self.stream.write(CURSOR_LEFT + " " + CURSOR_LEFT)
                    self.stream.flush()
            elif key.code is KeyCode.CHAR and key.char and not _is_control(key.char):
                chars.append(key.char)
                self.stream.write(key.char)
                self.stream.flush()