"""Logic for splitting captured text into lines on newlines only."""


def split_text_lines(text: str) -> list[str]:
    """Split text on ``\\n`` alone, dropping a single trailing newline.

    Form feeds, U+2028 and the other separators ``str.splitlines`` honours stay
    inside their line so line numbers match the source. ``\\r\\n`` and lone
    ``\\r`` are normalized first, as universal-newline reading does.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")
