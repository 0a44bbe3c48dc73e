"""Hosts the motion commands run against.

A host owns the text and the cursor. The commands only read the current line,
ask for a cursor move, or ask for a range to be deleted. Two hosts are
provided: a single-line command line built on InputBuffer, where moves and
deletes happen one column at a time, and a multi-line buffer addressed by
(line, column).
"""

from __future__ import annotations

from typing import Protocol

from readline_edit.constants import BLOCK_CURSOR_MODES, SMALL_DELETE_REGISTER
from readline_edit.input_buffer import InputBuffer
from readline_edit.types import Position


class Host(Protocol):
    def current_line_text(self) -> str: ...

    def current_cursor_column(self) -> int: ...

    def current_line_number(self) -> int | None: ...

    def total_line_count(self) -> int | None: ...

    def get_line_text(self, line_no: int | None) -> str: ...

    def block_cursor(self) -> bool: ...

    def set_cursor(self, line_no: int | None, col: int) -> None: ...

    def delete_range(self, line1: int | None, col1: int, line2: int | None, col2: int) -> None: ...

    def write_clipboard_register(self, text: str) -> None: ...

    def read_clipboard_register(self) -> str | None: ...

    def notify_edit_boundary(self) -> None: ...

    def filetype(self) -> str | None: ...

    def word_chars_override(self) -> str | None: ...


def _check_col(text: str, col: int):
    if not 0 <= col <= len(text):
        raise ValueError(f"cursor column {col} outside 0..{len(text)}")


class CommandLineHost:
    """A single input line without line numbers.

    Cursor moves become repeated left/right steps and deletions repeated
    deletes or backspaces, the way keys would be fed to a command line.
    """

    def __init__(self, buffer: InputBuffer | None = None):
        self.buffer = buffer if buffer is not None else InputBuffer()
        self.registers: dict[str, str] = {}

    def current_line_text(self) -> str:
        return self.buffer.text

    def current_cursor_column(self) -> int:
        return self.buffer.cursor

    def current_line_number(self) -> None:
        return None

    def total_line_count(self) -> None:
        return None

    def get_line_text(self, line_no: int | None) -> str:
        if line_no is not None:
            raise ValueError("a command line has no line numbers")
        return self.buffer.text

    def block_cursor(self) -> bool:
        return False

    def set_cursor(self, line_no: int | None, col: int) -> None:
        if line_no is not None:
            raise ValueError("a command line has no line numbers")
        _check_col(self.buffer.text, col)
        while self.buffer.cursor > col:
            self.buffer.move_left()
        while self.buffer.cursor < col:
            self.buffer.move_right()

    def delete_range(self, line1: int | None, col1: int, line2: int | None, col2: int) -> None:
        if line1 is not None or line2 is not None:
            raise ValueError("a command line has no line numbers")
        _check_col(self.buffer.text, col1)
        _check_col(self.buffer.text, col2)
        lo, hi = min(col1, col2), max(col1, col2)
        if self.buffer.cursor == lo:
            # Range starts at the cursor: delete forward without moving
            for _ in range(hi - lo):
                self.buffer.delete()
        else:
            self.set_cursor(None, hi)
            for _ in range(hi - lo):
                self.buffer.backspace()

    def write_clipboard_register(self, text: str) -> None:
        self.registers[SMALL_DELETE_REGISTER] = text

    def read_clipboard_register(self) -> str | None:
        return self.registers.get(SMALL_DELETE_REGISTER)

    def notify_edit_boundary(self) -> None:
        # Command-line edits are not undoable
        pass

    def filetype(self) -> None:
        return None

    def word_chars_override(self) -> None:
        return None


class BufferHost:
    """A multi-line text buffer with a (line, column) cursor.

    Lines are one-based and columns zero-based. `mode` is a Vim mode() string
    and decides whether the cursor is drawn as a block, which takes the
    column past the last character out of reach.
    """

    def __init__(
        self,
        lines: list[str] | None = None,
        line: int = 1,
        col: int = 0,
        mode: str = "i",
        filetype: str | None = None,
        word_chars: str | None = None,
    ):
        self.lines: list[str] = list(lines) if lines else [""]
        self.mode = mode
        self._filetype = filetype
        self._word_chars = word_chars
        self.registers: dict[str, str] = {}
        self._undo_stack: list[tuple[list[str], Position]] = []
        self.cursor = Position(1, 0)
        self.set_cursor(line, col)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def _check_line(self, line_no: int | None) -> int:
        if line_no is None or not 1 <= line_no <= len(self.lines):
            raise IndexError(f"line {line_no} outside 1..{len(self.lines)}")
        return line_no

    def current_line_text(self) -> str:
        return self.lines[self.cursor.line - 1]

    def current_cursor_column(self) -> int:
        return self.cursor.col

    def current_line_number(self) -> int:
        return self.cursor.line

    def total_line_count(self) -> int:
        return len(self.lines)

    def get_line_text(self, line_no: int | None) -> str:
        return self.lines[self._check_line(line_no) - 1]

    def block_cursor(self) -> bool:
        return BLOCK_CURSOR_MODES.get(self.mode, False)

    def set_cursor(self, line_no: int | None, col: int) -> None:
        line_no = self._check_line(line_no)
        _check_col(self.lines[line_no - 1], col)
        self.cursor = Position(line_no, self._clamp_col(line_no, col))

    def _clamp_col(self, line_no: int, col: int) -> int:
        """A block cursor sits on a character, never past the last one."""
        length = len(self.lines[line_no - 1])
        if self.block_cursor():
            return min(col, max(0, length - 1))
        return min(col, length)

    def delete_range(self, line1: int | None, col1: int, line2: int | None, col2: int) -> None:
        line1 = self._check_line(line1)
        line2 = self._check_line(line2)
        _check_col(self.lines[line1 - 1], col1)
        _check_col(self.lines[line2 - 1], col2)
        (sl, sc), (el, ec) = sorted([(line1, col1), (line2, col2)])

        joined = self.lines[sl - 1][:sc] + self.lines[el - 1][ec:]
        self.lines[sl - 1 : el] = [joined]

        # Keep the cursor addressable; callers position it afterwards
        line_no = min(self.cursor.line, len(self.lines))
        self.cursor = Position(line_no, self._clamp_col(line_no, self.cursor.col))

    def write_clipboard_register(self, text: str) -> None:
        self.registers[SMALL_DELETE_REGISTER] = text

    def read_clipboard_register(self) -> str | None:
        return self.registers.get(SMALL_DELETE_REGISTER)

    def notify_edit_boundary(self) -> None:
        """Start a new undo group by snapshotting the buffer."""
        self._undo_stack.append((list(self.lines), self.cursor))

    def undo(self) -> bool:
        """Restore the last snapshot. Returns False when there is none."""
        if not self._undo_stack:
            return False
        self.lines, self.cursor = self._undo_stack.pop()
        return True

    def filetype(self) -> str | None:
        return self._filetype

    def word_chars_override(self) -> str | None:
        return self._word_chars
