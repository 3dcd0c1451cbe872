"""Tests for cursor navigation to resolved targets."""

import io
from unittest.mock import MagicMock

from replnav.console_editor import ConsoleEditor
from replnav.editor import Editor, OpenOutcome
from replnav.navigator import jump_to, to_position
from replnav.resolved_target import ResolvedTarget


def _editor(
    current_file: str = "/src/current.clj", *, modified: bool = False
) -> ConsoleEditor:
    return ConsoleEditor(io.StringIO(), current_file, modified=modified)


def test_empty_path_is_noop() -> None:
    """Verify that a target without a path touches nothing."""
    editor = MagicMock(spec=Editor)
    jump_to(editor, ResolvedTarget("", "3", "4"))
    assert editor.method_calls == []


def test_cross_file_navigation_order() -> None:
    """Verify that the jump is recorded before the file switch."""
    editor = MagicMock(spec=Editor)
    editor.current_file.return_value = "/src/current.clj"
    editor.open_file.return_value = OpenOutcome.OK

    jump_to(editor, ResolvedTarget("/src/app.clj", "42", "7"))

    names = [c[0] for c in editor.method_calls]
    assert names == [
        "mark_jump",
        "current_file",
        "open_file",
        "set_cursor",
        "center_view",
    ]
    editor.open_file.assert_called_once_with("/src/app.clj")
    editor.set_cursor.assert_called_once_with(42, 7)


def test_same_file_skips_open() -> None:
    """Verify that the active file is not re-opened."""
    editor = _editor("/src/app.clj")
    jump_to(editor, ResolvedTarget("/src/app.clj", "5", "2"))
    assert editor.open_calls == 0
    assert editor.cursor == (5, 2)
    assert editor.stream.getvalue() == "/src/app.clj:5:2\n"


def test_same_file_twice_is_idempotent() -> None:
    """Verify repeated navigation ends at the same place without opening files."""
    editor = _editor("/src/app.clj")
    target = ResolvedTarget("/src/app.clj", "12", "3")
    jump_to(editor, target)
    first = editor.cursor
    jump_to(editor, target)
    assert editor.cursor == first == (12, 3)
    assert editor.open_calls == 0
    assert len(editor.jump_list) == 2


def test_conflict_skips_cursor_move() -> None:
    """Verify that an unsaved active buffer silently stops navigation."""
    editor = _editor("/src/dirty.clj", modified=True)
    jump_to(editor, ResolvedTarget("/src/app.clj", "9", "9"))
    assert editor.open_calls == 1
    assert editor.current_file() == "/src/dirty.clj"
    assert editor.cursor == (1, 1)
    assert editor.jump_list == [("/src/dirty.clj", 1, 1)]
    assert editor.stream.getvalue() == ""


def test_modified_same_file_still_moves() -> None:
    """Verify that unsaved changes do not block moves within the active file."""
    editor = _editor("/src/app.clj", modified=True)
    jump_to(editor, ResolvedTarget("/src/app.clj", "4", "1"))
    assert editor.cursor == (4, 1)


def test_to_position() -> None:
    """Verify conversion of backend positions to 1-based integers."""
    assert to_position("42") == 42
    assert to_position(" 7 ") == 7
    assert to_position("") == 1
    assert to_position("abc") == 1
    assert to_position("0") == 1
