from externkit.buffer import Editor


def make(lines, width=80, height=24):
    return Editor(content=list(lines), terminal_width=width, terminal_height=height)


def test_new_editor_has_one_empty_line():
    editor = Editor(terminal_width=80, terminal_height=24)
    assert editor.content == [""]
    assert (editor.cursor_x, editor.cursor_y, editor.offset_y) == (0, 0, 0)
    assert editor.filename is None
    assert not editor.modified


def test_insert_chars_advances_cursor():
    editor = make([""])
    for c in "abc":
        editor.insert_char(c)
    assert editor.text() == "abc"
    assert editor.cursor_x == len("abc")
    assert editor.modified


def test_insert_char_in_middle():
    editor = make(["ac"])
    editor.cursor_x = 1
    editor.insert_char("b")
    assert editor.content == ["abc"]
    assert editor.cursor_x == 2


def test_newline_splits_line():
    editor = make(["abcd"])
    editor.cursor_x = 2
    editor.insert_newline()
    assert editor.content == ["abcd"[:2], "abcd"[2:]]
    assert (editor.cursor_x, editor.cursor_y) == (0, 1)
    assert editor.modified


def test_newline_then_backspace_round_trip():
    editor = make(["hello world"])
    editor.cursor_x = 5
    editor.insert_newline()
    assert editor.content[0] + editor.content[1] == "hello world"
    editor.delete_char()
    assert editor.content == ["hello world"]
    assert (editor.cursor_x, editor.cursor_y) == (5, 0)


def test_delete_char_at_origin_does_nothing():
    editor = make(["abc"])
    editor.delete_char()
    assert editor.content == ["abc"]
    assert not editor.modified


def test_delete_char_removes_previous():
    editor = make(["abc"])
    editor.cursor_x = 3
    editor.delete_char()
    assert editor.content == ["abc"[:2]]
    assert editor.cursor_x == 2


def test_delete_forward_removes_under_cursor():
    editor = make(["abc"])
    editor.delete_char_forward()
    assert editor.content == ["abc"[1:]]
    assert editor.cursor_x == 0
    assert editor.modified


def test_delete_forward_joins_next_line():
    editor = make(["ab", "cd"])
    editor.cursor_x = 2
    editor.delete_char_forward()
    assert editor.content == ["ab" + "cd"]
    assert editor.cursor_y == 0


def test_delete_forward_at_end_of_last_line_does_nothing():
    editor = make(["ab"])
    editor.cursor_x = 2
    editor.delete_char_forward()
    assert editor.content == ["ab"]
    assert not editor.modified


def test_scrolling_keeps_cursor_visible():
    height = 6
    editor = make([str(n) for n in range(20)], height=height)
    for _ in range(30):
        editor.move_cursor_down()
        assert editor.offset_y <= editor.cursor_y < editor.offset_y + height - 2
    assert editor.cursor_y == 19
    for _ in range(30):
        editor.move_cursor_up()
        assert editor.offset_y <= editor.cursor_y < editor.offset_y + height - 2
    assert editor.cursor_y == 0
    assert editor.offset_y == 0


def test_vertical_move_clamps_column():
    editor = make(["long line", "ab"])
    editor.cursor_x = len("long line")
    editor.move_cursor_down()
    assert (editor.cursor_x, editor.cursor_y) == (len("ab"), 1)
    editor.move_cursor_up()
    assert (editor.cursor_x, editor.cursor_y) == (len("ab"), 0)


def test_left_wraps_to_previous_line_end():
    editor = make(["abc", "d"])
    editor.cursor_y = 1
    editor.move_cursor_left()
    assert (editor.cursor_x, editor.cursor_y) == (len("abc"), 0)


def test_right_wraps_to_next_line_start():
    editor = make(["abc", "d"])
    editor.cursor_x = 3
    editor.move_cursor_right()
    assert (editor.cursor_x, editor.cursor_y) == (0, 1)
    editor.move_cursor_right()
    editor.move_cursor_right()
    assert (editor.cursor_x, editor.cursor_y) == (len("d"), 1)


def test_home_and_end():
    editor = make(["abcdef"])
    editor.move_end()
    assert editor.cursor_x == len("abcdef")
    editor.move_home()
    assert editor.cursor_x == 0


def test_open_missing_file(tmp_path):
    path = tmp_path / "missing.txt"
    editor = Editor.open_file(path, 40, 10)
    assert editor.content == [""]
    assert editor.filename == str(path)
    assert (editor.terminal_width, editor.terminal_height) == (40, 10)
    assert not path.exists()


def test_open_file_splits_lines(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a\r\nb\n")
    editor = Editor.open_file(path, 40, 10)
    assert editor.content == ["a", "b"]


def test_open_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert Editor.open_file(path, 40, 10).content == [""]


def test_open_then_text_round_trip(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("x\n\ny")
    assert Editor.open_file(path, 40, 10).text() == "x\n\ny"