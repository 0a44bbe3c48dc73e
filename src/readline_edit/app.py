from __future__ import annotations

import time

from readline_edit.config import Config
from readline_edit.constants import SMALL_DELETE_REGISTER
from readline_edit.debug_log import DebugLogger
from readline_edit.hosts import BufferHost, CommandLineHost, Host
from readline_edit.input_buffer import InputBuffer
from readline_edit.motions import COMMANDS, KILL_COMMANDS
from readline_edit.scenario import parse_scenario, render_scenario
from readline_edit.types import EditEvent, Position


def make_host(
    contents: str,
    command_line: bool = False,
    mode: str = "i",
    filetype: str | None = None,
    word_chars: str | None = None,
) -> BufferHost | CommandLineHost:
    """Build a host from scenario text."""
    lines, line_no, col = parse_scenario(contents)
    if command_line:
        if len(lines) != 1:
            raise ValueError("a command line holds a single line")
        return CommandLineHost(InputBuffer(lines[0], col))
    return BufferHost(lines, line_no, col, mode=mode, filetype=filetype, word_chars=word_chars)


def host_scenario(host: BufferHost | CommandLineHost) -> str:
    """Render the host's text and cursor in scenario notation."""
    if isinstance(host, CommandLineHost):
        return render_scenario([host.buffer.text], None, host.buffer.cursor)
    return render_scenario(host.lines, host.cursor.line, host.cursor.col)


def run_command(
    host: Host, name: str, config: Config | None = None, logger: DebugLogger | None = None
) -> Position:
    """Run one command by its Readline name and log it."""
    func = COMMANDS.get(name)
    if func is None:
        raise ValueError(f"Unknown command '{name}'")
    config = config or Config()

    before = Position(host.current_line_number(), host.current_cursor_column())
    after = func(host, config)

    if logger is not None:
        logger.log_event(
            EditEvent(
                command=name,
                ts=time.time(),
                before=before,
                after=after,
                text_preview=host.current_line_text(),
            )
        )
        if name in KILL_COMMANDS:
            killed = host.read_clipboard_register() or ""
            logger.log_message(f"register {SMALL_DELETE_REGISTER!r}: {killed!r}")
    return after


def run_commands(
    host: Host, names: list[str], config: Config | None = None, logger: DebugLogger | None = None
) -> Position:
    config = config or Config()
    pos = Position(host.current_line_number(), host.current_cursor_column())
    for name in names:
        pos = run_command(host, name, config, logger)
    return pos
