"""Logic for moving the editor cursor to a resolved definition."""

import logging

from replnav.editor import Editor, OpenOutcome
from replnav.resolved_target import ResolvedTarget

logger = logging.getLogger(__name__)


def to_position(value: str) -> int:
    """Convert a backend line/column to a 1-based integer."""
    try:
        position = int(value)
    except ValueError:
        logger.debug("Unparseable position %r, using 1", value)
        return 1
    return max(position, 1)


def jump_to(editor: Editor, target: ResolvedTarget) -> None:
    """Navigate the editor to the target, best effort."""
    if not target.path:
        return

    # Recorded before switching files so the user can always jump back
    editor.mark_jump()

    if target.path != editor.current_file():
        if editor.open_file(target.path) is OpenOutcome.CONFLICT:
            logger.debug("Not navigating to %s: active buffer is modified", target.path)
            return

    editor.set_cursor(to_position(target.line), to_position(target.column))
    editor.center_view()
