import argparse
import sys

from readline_edit import __version__
from readline_edit.app import host_scenario, make_host, run_commands
from readline_edit.config import load_config
from readline_edit.debug_log import DebugLogger
from readline_edit.motions import COMMANDS


def _read_scenario(arg: str) -> str:
    """Read scenario text from the argument, or stdin for '-'."""
    if arg == "-":
        return sys.stdin.read().rstrip("\n")
    return arg.replace("\\n", "\n").replace("\\t", "\t")


def main(argv=None):
    p = argparse.ArgumentParser(
        description="Apply Readline motion and kill commands to text",
        epilog="The scenario marks the cursor with a single '|', e.g. 'hello| world'; write a literal bar as '\\|'.",
    )
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.readline-edit/configs/, ./configs/, or use full path)")
    p.add_argument("-f", "--filetype", default=None,
                   help="Filetype selecting word characters and comment leaders")
    p.add_argument("-w", "--word-chars", default=None,
                   help="Buffer-local word characters, overriding the config")
    p.add_argument("--mode", default="i",
                   help="Vim mode string; block-cursor modes such as 'n' end lines one column early (default: i)")
    p.add_argument("--command-line", action="store_true", default=False,
                   help="Treat the text as a single command line without line numbers")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to readline_edit.log in current directory")
    p.add_argument("-l", "--list", action="store_true", default=False,
                   help="List available commands and exit")
    p.add_argument("args", nargs="*", metavar="ARG",
                   help="Commands to apply in order, followed by the scenario text ('-' for stdin)")
    args = p.parse_args(argv)

    if args.list:
        for name in COMMANDS:
            print(name)
        return

    if len(args.args) < 2:
        p.error("at least one command and a scenario are required")
    *names, scenario = args.args
    unknown = [n for n in names if n not in COMMANDS]
    if unknown:
        p.error(f"unknown command(s): {', '.join(unknown)} (see --list)")

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        p.error(str(e))

    try:
        host = make_host(
            _read_scenario(scenario),
            command_line=args.command_line,
            mode=args.mode,
            filetype=args.filetype,
            word_chars=args.word_chars,
        )
    except ValueError as e:
        p.error(str(e))

    logger = DebugLogger()
    if args.debug:
        logger.start()
    try:
        run_commands(host, names, config, logger)
    finally:
        logger.stop()

    print(host_scenario(host))
