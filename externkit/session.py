"""Running the editor in a real terminal."""

from __future__ import annotations

from typing import Any

from blessed import Terminal

from externkit.buffer import Editor
from externkit.display import CLEAR_SCREEN, CURSOR_MOVE, Display
from externkit.input import InputHandler, Key, KeyCode

_SEQUENCE_CODES = {
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_DELETE": KeyCode.DELETE,
    "KEY_TAB": KeyCode.TAB,
    "KEY_ESCAPE": KeyCode.ESC,
}

_RAW_CODES = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\t": KeyCode.TAB,
    "\x1b": KeyCode.ESC,
}


def to_key(keystroke: str) -> Key | None:
    """Convert a terminal keystroke to a Key; None for an empty keystroke."""
    if not keystroke:
        return None
    if getattr(keystroke, "is_sequence", False):
        name = getattr(keystroke, "name", None)
        return Key(_SEQUENCE_CODES.get(name, KeyCode.OTHER))
    text = str(keystroke)
    if text in _RAW_CODES:
        return Key(_RAW_CODES[text])
    if len(text) != 1:
        return Key(KeyCode.OTHER)
    if "\x01" <= text <= "\x1a":
        return Key(KeyCode.CHAR, chr(ord(text) + ord("a") - 1), ctrl=True)
    return Key(KeyCode.CHAR, text)


def run_editor(editor: Editor, terminal: Any) -> None:
    """Drive ``editor`` with keys from ``terminal`` until the user exits."""
    stream = terminal.stream

    def read_key() -> Key:
        while True:
            key = to_key(terminal.inkey())
            if key is not None:
                return key

    display = Display(stream)
    handler = InputHandler(read_key, stream)
    with terminal.raw():
        stream.write(CLEAR_SCREEN)
        stream.flush()
        while True:
            display.refresh_screen(editor)
            if handler.process_key(editor, read_key()):
                break
    stream.write(CLEAR_SCREEN + CURSOR_MOVE.format(row=1, column=1))
    stream.flush()


def start_editor(filename: str | None = None) -> None:
    """Open ``filename`` (or an empty buffer) in the terminal editor."""
    terminal = Terminal()
    if filename:
        editor = Editor.open_file(filename, terminal.width, terminal.height)
    else:
        editor = Editor(terminal_width=terminal.width, terminal_height=terminal.height)
    run_editor(editor, terminal)