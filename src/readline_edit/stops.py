"""Cursor stops for DWIM beginning-of-line and kill commands."""

from readline_edit.boundaries import leading_whitespace_end
from readline_edit.chars import is_whitespace
from readline_edit.trie import build_trie, match_from


def backward_line_stops(line: str, comment_leaders: list[str]) -> list[int]:
    """Return the interesting cursor columns on `line`, in increasing order.

    Always starts with 0, then the end of the indentation, then the first
    column after a comment leader and the whitespace following it. A stop is
    only added when it is past the previous one, so the result holds one to
    three columns.
    """
    stops = [0]

    indent = leading_whitespace_end(line)
    if indent > stops[-1]:
        stops.append(indent)

    data = line.encode("utf-8")
    byte_offset = len(line[:indent].encode("utf-8"))
    match_end = match_from(build_trie(comment_leaders), data, byte_offset)

    if match_end is not None:
        col = len(data[:match_end].decode("utf-8"))
        while col < len(line) and is_whitespace(line[col]):
            col += 1
        if col > stops[-1]:
            stops.append(col)

    return stops
