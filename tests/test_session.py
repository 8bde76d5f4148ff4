import io
from contextlib import contextmanager
from unittest.mock import patch

import pytest
from blessed.keyboard import Keystroke

from externkit.buffer import Editor
from externkit.display import CLEAR_SCREEN, HELP_TEXT
from externkit.input import Key, KeyCode
from externkit.session import run_editor, start_editor, to_key


class FakeTerminal:
    def __init__(self, keys, width=40, height=10):
        self.keys = list(keys)
        self.stream = io.StringIO()
        self.width = width
        self.height = height
        self.raw_entered = False
        self.raw_exited = False

    @contextmanager
    def raw(self):
        self.raw_entered = True
        try:
            yield
        finally:
            self.raw_exited = True

    def inkey(self, timeout=None):
        return self.keys.pop(0)


def strokes(text):
    return [Keystroke(c) for c in text]


@pytest.mark.parametrize(
    "name, code",
    [
        ("KEY_UP", KeyCode.UP),
        ("KEY_DOWN", KeyCode.DOWN),
        ("KEY_LEFT", KeyCode.LEFT),
        ("KEY_RIGHT", KeyCode.RIGHT),
        ("KEY_HOME", KeyCode.HOME),
        ("KEY_END", KeyCode.END),
        ("KEY_ENTER", KeyCode.ENTER),
        ("KEY_BACKSPACE", KeyCode.BACKSPACE),
        ("KEY_DELETE", KeyCode.DELETE),
        ("KEY_ESCAPE", KeyCode.ESC),
        ("KEY_F1", KeyCode.OTHER),
    ],
)
def test_to_key_sequences(name, code):
    assert to_key(Keystroke("\x1b[X", code=1, name=name)) == Key(code)


@pytest.mark.parametrize(
    "text, code",
    [
        ("\r", KeyCode.ENTER),
        ("\n", KeyCode.ENTER),
        ("\x7f", KeyCode.BACKSPACE),
        ("\t", KeyCode.TAB),
        ("\x1b", KeyCode.ESC),
    ],
)
def test_to_key_raw_characters(text, code):
    assert to_key(Keystroke(text)) == Key(code)


@pytest.mark.parametrize("text, letter", [("\x18", "x"), ("\x13", "s"), ("\x0f", "o")])
def test_to_key_control_letters(text, letter):
    assert to_key(Keystroke(text)) == Key(KeyCode.CHAR, letter, ctrl=True)


def test_to_key_plain_character():
    assert to_key(Keystroke("a")) == Key(KeyCode.CHAR, "a")


def test_to_key_empty_is_none():
    assert to_key(Keystroke("")) is None


def test_run_editor_types_and_saves(tmp_path):
    path = tmp_path / "doc.txt"
    keys = strokes("hi") + [Keystroke(""), Keystroke("\x13"), Keystroke("\x18")]
    terminal = FakeTerminal(keys)
    editor = Editor(filename=str(path), terminal_width=40, terminal_height=10)
    run_editor(editor, terminal)
    assert path.read_text() == "hi"
    assert not editor.modified
    assert terminal.raw_entered and terminal.raw_exited
    output = terminal.stream.getvalue()
    assert output.startswith(CLEAR_SCREEN)
    assert HELP_TEXT in output
    assert terminal.keys == []


def test_run_editor_exit_with_save_prompt(tmp_path):
    path = tmp_path / "doc.txt"
    keys = strokes("ab") + [Keystroke("\r")] + strokes("c") + [Keystroke("\x18")]
    keys += strokes("y")
    terminal = FakeTerminal(keys)
    editor = Editor(filename=str(path), terminal_width=40, terminal_height=10)
    run_editor(editor, terminal)
    assert path.read_text() == "ab\nc"


def test_start_editor_uses_terminal(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("one\ntwo")
    terminal = FakeTerminal([Keystroke("\x1b[F", code=1, name="KEY_END")] + strokes("!"))
    terminal.keys += [Keystroke("\x13"), Keystroke("\x18")]
    with patch("externkit.session.Terminal", return_value=terminal):
        start_editor(str(path))
    assert path.read_text() == "one!\ntwo"
    assert terminal.raw_exited