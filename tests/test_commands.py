"""Test key dispatch in navigating and editing modes."""

import os
import tempfile

import pytest
from unittest.mock import MagicMock

from gridmark.editor import Editor
from gridmark.errors import SaveError
from gridmark.keyboard import KeyboardHandler
from gridmark.model import Grid
from gridmark.state import Cursor, Editing, Navigating
from gridmark.terminal import TerminalInterface


def key(name):
    return KeyboardHandler(None).parse_key(name)


def press(editor, *names):
    for name in names:
        editor._handle_key_event(key(name))


@pytest.fixture
def csv_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "data.csv")
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write("a,b\nc,d\n")
        yield path


def make_editor(path):
    return Editor.load_file(path, terminal=MagicMock(spec=TerminalInterface))


def read(path):
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def test_arrows_move_selection(csv_path):
    editor = make_editor(csv_path)
    press(editor, '<RIGHT>', '<DOWN>')
    assert editor.state.cursor == Cursor(1, 1)
    press(editor, '<Shift-LEFT>', '<UP>')
    assert editor.state.cursor == Cursor(0, 0)


def test_e_enters_editing_with_cell_text(csv_path):
    editor = make_editor(csv_path)
    press(editor, '<RIGHT>', 'e')
    assert editor.state.mode == Editing(0, 1, "b")


def test_typing_and_enter_commits(csv_path):
    editor = make_editor(csv_path)
    press(editor, 'e', 'X', '<SPACE>', 'q', 'w', 'e', '<Ctrl-j>')

    assert editor.state.grid.rows == [["aX qwe", "b"], ["c", "d"]]
    assert editor.state.dirty is True
    assert editor.state.mode == Navigating()
    assert editor.running is False
    assert read(csv_path) == "a,b\nc,d\n"


def test_escape_cancels_edit(csv_path):
    editor = make_editor(csv_path)
    press(editor, 'e', 'Z', '<BACKSPACE>', '<BACKSPACE>', '<ESC>')

    assert editor.state.grid.rows == [["a", "b"], ["c", "d"]]
    assert editor.state.dirty is False
    assert editor.state.mode == Navigating()


def test_arrows_and_modified_keys_ignored_while_editing(csv_path):
    editor = make_editor(csv_path)
    press(editor, 'e', '<LEFT>', '<DOWN>', '<Ctrl-x>', '<Esc+a>', '<TAB>', '<F1>')

    assert editor.state.mode == Editing(0, 0, "a")
    assert editor.state.cursor == Cursor(0, 0)


def test_unbound_keys_ignored_while_navigating(csv_path):
    editor = make_editor(csv_path)
    press(editor, 'x', 'E', '<Ctrl-j>', '<ESC>', '<BACKSPACE>')

    assert editor.state.mode == Navigating()
    assert editor.state.cursor == Cursor(0, 0)
    assert editor.state.grid.rows == [["a", "b"], ["c", "d"]]


def test_w_saves_and_clears_dirty(csv_path):
    editor = make_editor(csv_path)
    press(editor, 'e', 'X', '<Ctrl-j>', 'w')

    assert editor.state.dirty is False
    assert read(csv_path) == "aX,b\nc,d\n"
    assert editor.state.mode == Navigating()


def test_quit_saves_when_dirty(csv_path):
    editor = make_editor(csv_path)
    editor.running = True
    press(editor, 'e', 'X', '<Ctrl-j>', 'q')

    assert read(csv_path).splitlines()[0] == "aX,b"
    assert editor.state.dirty is False
    assert editor.running is False


def test_quit_when_clean_does_not_write(csv_path):
    editor = make_editor(csv_path)
    editor.running = True
    before = os.stat(csv_path).st_ino

    press(editor, 'q')

    # An atomic save would have replaced the file with a new inode
    assert os.stat(csv_path).st_ino == before
    assert editor.running is False


def test_failed_save_keeps_dirty_and_mode():
    editor = Editor("/nonexistent/dir/data.csv", Grid([["a"]]),
                    terminal=MagicMock(spec=TerminalInterface))
    press(editor, 'e', 'b', '<Ctrl-j>')

    with pytest.raises(SaveError):
        press(editor, 'w')

    assert editor.state.dirty is True
    assert editor.state.mode == Navigating()


def test_failed_save_aborts_quit():
    editor = Editor("/nonexistent/dir/data.csv", Grid([["a"]]),
                    terminal=MagicMock(spec=TerminalInterface))
    editor.running = True
    press(editor, 'e', 'b', '<Ctrl-j>')

    with pytest.raises(SaveError):
        press(editor, 'q')

    assert editor.running is True
    assert editor.state.dirty is True


def test_edit_beyond_data_grows_grid(csv_path):
    editor = make_editor(csv_path)
    editor.state.grid.rows.append([])
    press(editor, '<DOWN>', '<DOWN>', 'e', 'n', '<Ctrl-j>', 'w')

    assert editor.state.grid.rows == [["a", "b"], ["c", "d"], ["n"]]
    assert read(csv_path) == "a,b\nc,d\nn\n"
