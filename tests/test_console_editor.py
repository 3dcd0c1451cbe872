"""Tests for the console editor."""

import io

import pytest

from replnav.console_editor import ConsoleEditor
from replnav.editor import OpenOutcome


def test_open_switches_buffer() -> None:
    """Verify that opening a file makes it active and resets the cursor."""
    editor = ConsoleEditor(io.StringIO(), "/a.clj")
    editor.set_cursor(5, 5)
    assert editor.open_file("/b.clj") is OpenOutcome.OK
    assert editor.current_file() == "/b.clj"
    assert editor.cursor == (1, 1)


def test_open_conflicts_on_modified_buffer() -> None:
    """Verify that unsaved changes block switching files."""
    editor = ConsoleEditor(io.StringIO(), "/a.clj", modified=True)
    assert editor.open_file("/b.clj") is OpenOutcome.CONFLICT
    assert editor.current_file() == "/a.clj"


def test_mark_jump_records_position() -> None:
    """Verify that the jump list captures file and cursor."""
    editor = ConsoleEditor(io.StringIO(), "/a.clj")
    editor.set_cursor(3, 8)
    editor.mark_jump()
    assert editor.jump_list == [("/a.clj", 3, 8)]


def test_center_view_prints_location() -> None:
    """Verify the grep-style location output."""
    stream = io.StringIO()
    editor = ConsoleEditor(stream, "/a.clj")
    editor.set_cursor(10, 2)
    editor.center_view()
    assert stream.getvalue() == "/a.clj:10:2\n"


def test_warn_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that warnings do not mix with location output."""
    stream = io.StringIO()
    ConsoleEditor(stream).warn("backend missing")
    assert capsys.readouterr().err == "Warning: backend missing\n"
    assert stream.getvalue() == ""
