"""Text with a `|` marking the cursor, e.g. "hello| world".

Lines are separated by newlines; exactly one unescaped `|` must appear. A
literal bar is written `\\|`, so "a \\|\\| b|" is the line "a || b" with the
cursor at its end. The cursor is returned as a one-based line and a
zero-based column.
"""

from __future__ import annotations

CURSOR_MARK = "|"
ESCAPED_MARK = "\\" + CURSOR_MARK


def parse_scenario(contents: str) -> tuple[list[str], int, int]:
    """Split scenario text into (lines, cursor_line, cursor_col)."""
    lines = []
    cursor = None
    for line_no, line in enumerate(contents.split("\n"), start=1):
        chars = []
        i = 0
        while i < len(line):
            if line.startswith(ESCAPED_MARK, i):
                chars.append(CURSOR_MARK)
                i += 2
                continue
            if line[i] == CURSOR_MARK:
                if cursor is not None:
                    raise ValueError(f"use exactly one {CURSOR_MARK!r} to indicate the cursor position")
                cursor = (line_no, len(chars))
            else:
                chars.append(line[i])
            i += 1
        lines.append("".join(chars))

    if cursor is None:
        raise ValueError(f"use exactly one {CURSOR_MARK!r} to indicate the cursor position")
    return lines, cursor[0], cursor[1]


def _escape(s: str) -> str:
    return s.replace(CURSOR_MARK, ESCAPED_MARK)


def render_scenario(lines: list[str], line_no: int | None, col: int) -> str:
    """Inverse of parse_scenario. A line number of None means the first line."""
    idx = (line_no or 1) - 1
    out = [_escape(line) for line in lines]
    line = lines[idx]
    out[idx] = _escape(line[:col]) + CURSOR_MARK + _escape(line[col:])
    return "\n".join(out)
