"""Readline motion and kill commands.

Every command takes a host and an optional Config, performs exactly one move
or kill, and returns where the cursor ends up. Word motions continue onto the
adjacent line when the cursor is already at the edge of the current one.
"""

from __future__ import annotations

from collections.abc import Callable

from readline_edit.boundaries import (
    backward_word_cursor,
    forward_word_cursor,
    leading_whitespace_end,
    trailing_whitespace_start,
)
from readline_edit.config import Config, lookup_comment_leaders, lookup_word_characters
from readline_edit.constants import NON_WHITESPACE_CHARS
from readline_edit.hosts import Host
from readline_edit.stops import backward_line_stops
from readline_edit.types import Position

CommandFunc = Callable[..., Position]


# ============================================================================
# Target positions
# ============================================================================


def _here(host: Host) -> Position:
    return Position(host.current_line_number(), host.current_cursor_column())


def last_cursor_col(host: Host) -> int:
    """Last reachable column; a block cursor cannot sit past the last char."""
    length = len(host.current_line_text())
    if host.block_cursor():
        return max(0, length - 1)
    return length


def start_of_next_line(host: Host) -> Position:
    line_no = host.current_line_number()
    if line_no is None or line_no == host.total_line_count():
        return _here(host)
    return Position(line_no + 1, leading_whitespace_end(host.get_line_text(line_no + 1)))


def end_of_previous_line(host: Host) -> Position:
    line_no = host.current_line_number()
    if line_no is None or line_no == 1:
        return _here(host)
    return Position(line_no - 1, trailing_whitespace_start(host.get_line_text(line_no - 1)))


def forward_word_location(host: Host, word_chars: str) -> Position:
    if host.current_cursor_column() == last_cursor_col(host):
        return start_of_next_line(host)
    col = forward_word_cursor(host.current_line_text(), host.current_cursor_column(), word_chars)
    return Position(host.current_line_number(), col)


def backward_word_location(host: Host, word_chars: str) -> Position:
    if host.current_cursor_column() == 0:
        return end_of_previous_line(host)
    col = backward_word_cursor(host.current_line_text(), host.current_cursor_column(), word_chars)
    return Position(host.current_line_number(), col)


def dwim_beginning_of_line_location(
    host: Host, comment_leaders: list[str], roll_to_previous_line: bool = False
) -> Position:
    """Step left through the line's stops: comment text, indentation, column 0.

    From the first stop this wraps around to the last one, or, with
    `roll_to_previous_line`, moves to the end of the previous line instead.
    """
    line_no = host.current_line_number()
    stops = backward_line_stops(host.current_line_text(), comment_leaders)
    col = host.current_cursor_column()
    for i, stop in enumerate(stops):
        if col <= stop:
            if i > 0:
                return Position(line_no, stops[i - 1])
            if roll_to_previous_line:
                return end_of_previous_line(host)
            return Position(line_no, stops[-1])
    return Position(line_no, stops[-1])


# ============================================================================
# Moving and killing
# ============================================================================


def move_cursor_to(host: Host, target: Position) -> Position:
    """Move to `target` and return where the host put the cursor."""
    host.set_cursor(target.line, target.col)
    return _here(host)


def _yank_to_small_delete_register(host: Host, col1: int, col2: int):
    """Copy the current line between two columns, given in either order."""
    if col1 == col2:
        return
    left, right = min(col1, col2), max(col1, col2)
    host.write_clipboard_register(host.current_line_text()[left:right])


def _document_order(pos: Position) -> tuple[int, int]:
    return (pos.line or 0, pos.col)


def kill_to(host: Host, target: Position) -> Position:
    """Kill from the cursor to `target` and leave the cursor at the lower end.

    Only the part on the current line reaches the register. The target may
    be at most one line away.
    """
    start = _here(host)
    if target == start:
        return start

    if target.line != start.line:
        if start.line is None or target.line is None or abs(target.line - start.line) != 1:
            raise ValueError(f"cannot kill from {start} to {target}")

    if target.line == start.line:
        other_col = target.col
    elif target.line > start.line:
        other_col = last_cursor_col(host)
    else:
        other_col = 0
    _yank_to_small_delete_register(host, start.col, other_col)

    host.notify_edit_boundary()
    host.delete_range(start.line, start.col, target.line, target.col)
    lower = min(start, target, key=_document_order)
    host.set_cursor(lower.line, lower.col)
    return _here(host)


# ============================================================================
# Commands
# ============================================================================


def forward_word(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    return move_cursor_to(host, forward_word_location(host, lookup_word_characters(config, host)))


def backward_word(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    return move_cursor_to(host, backward_word_location(host, lookup_word_characters(config, host)))


def end_of_line(host: Host, config: Config | None = None) -> Position:
    return move_cursor_to(host, Position(host.current_line_number(), last_cursor_col(host)))


def beginning_of_line(host: Host, config: Config | None = None) -> Position:
    return move_cursor_to(host, Position(host.current_line_number(), 0))


def dwim_beginning_of_line(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    target = dwim_beginning_of_line_location(host, lookup_comment_leaders(config, host))
    return move_cursor_to(host, target)


def back_to_indentation(host: Host, config: Config | None = None) -> Position:
    col = leading_whitespace_end(host.current_line_text())
    return move_cursor_to(host, Position(host.current_line_number(), col))


def kill_word(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    return kill_to(host, forward_word_location(host, lookup_word_characters(config, host)))


def backward_kill_word(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    return kill_to(host, backward_word_location(host, lookup_word_characters(config, host)))


def unix_word_rubout(host: Host, config: Config | None = None) -> Position:
    return kill_to(host, backward_word_location(host, NON_WHITESPACE_CHARS))


def kill_line(host: Host, config: Config | None = None) -> Position:
    return kill_to(host, Position(host.current_line_number(), last_cursor_col(host)))


def backward_kill_line(host: Host, config: Config | None = None) -> Position:
    return kill_to(host, Position(host.current_line_number(), 0))


def dwim_backward_kill_line(host: Host, config: Config | None = None) -> Position:
    config = config or Config()
    target = dwim_beginning_of_line_location(
        host, lookup_comment_leaders(config, host), roll_to_previous_line=True
    )
    return kill_to(host, target)


# ============================================================================
# Command registry
# ============================================================================

COMMANDS: dict[str, CommandFunc] = {
    "forward-word": forward_word,
    "backward-word": backward_word,
    "end-of-line": end_of_line,
    "beginning-of-line": beginning_of_line,
    "dwim-beginning-of-line": dwim_beginning_of_line,
    "back-to-indentation": back_to_indentation,
    "kill-word": kill_word,
    "backward-kill-word": backward_kill_word,
    "unix-word-rubout": unix_word_rubout,
    "kill-line": kill_line,
    "backward-kill-line": backward_kill_line,
    "dwim-backward-kill-line": dwim_backward_kill_line,
}

# Commands that change the text
KILL_COMMANDS = {
    "kill-word",
    "backward-kill-word",
    "unix-word-rubout",
    "kill-line",
    "backward-kill-line",
    "dwim-backward-kill-line",
}
