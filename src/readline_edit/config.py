"""Configuration system with minimal YAML parser.

Configuration holds the word-character tables and comment leaders used by
the motion commands. Files are read with a small YAML subset parser (no
external dependencies) supporting:
- Scalars (strings, numbers, booleans, null)
- Lists (- item syntax)
- Nested dictionaries (key: value syntax)
- Comments (# ...)
- Quoted strings (single and double)

Word-character strings should be quoted so that digits-only values are not
read as numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path
from typing import TYPE_CHECKING

from readline_edit.constants import ALPHANUM, COMMENT_LEADERS

if TYPE_CHECKING:
    from readline_edit.hosts import Host

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a simple YAML document into a Python dict."""
    lines = []
    for raw in text.split("\n"):
        stripped = raw.lstrip()
        # Skip empty lines and comments
        if not stripped or stripped.startswith("#"):
            continue
        lines.append((len(raw) - len(stripped), stripped.rstrip()))

    if not lines:
        return {}
    result, _ = _parse_block(lines, 0, lines[0][0])
    return result if isinstance(result, dict) else {}


def _is_list_item(content: str) -> bool:
    return content == "-" or content.startswith("- ")


def _parse_block(
    lines: list[tuple[int, str]], start: int, indent: int
) -> tuple[dict | list, int]:
    """Parse the block of (indent, content) lines at `start` with `indent`."""
    is_list = _is_list_item(lines[start][1])
    result: dict | list = [] if is_list else {}
    i = start

    while i < len(lines):
        line_indent, content = lines[i]
        if line_indent < indent:
            break
        if line_indent > indent:
            # Stray over-indented line
            i += 1
            continue
        if _is_list_item(content) != is_list:
            break

        if is_list:
            value_part = _remove_inline_comment(content[1:].strip())
        else:
            colon_pos = _find_unquoted_colon(content)
            if colon_pos <= 0:
                i += 1
                continue
            key = _unquote(content[:colon_pos].strip())
            value_part = _remove_inline_comment(content[colon_pos + 1 :].strip())
        i += 1

        if value_part:
            value = _parse_value(value_part)
        elif i < len(lines) and (
            lines[i][0] > line_indent
            # A list may sit at the same indent as its key
            or (not is_list and lines[i][0] == line_indent and _is_list_item(lines[i][1]))
        ):
            value, i = _parse_block(lines, i, lines[i][0])
        else:
            value = None

        if is_list:
            result.append(value)
        else:
            result[key] = value

    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Find the position of the first colon not inside quotes."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == ":" and not in_single and not in_double:
            return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Remove an unquoted ' #' comment from a value string."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == "#" and not in_single and not in_double and i > 0 and s[i - 1] == " ":
            return s[:i].rstrip()
    return s


def _unquote(s: str) -> str:
    if len(s) >= 2 and s[0] == s[-1] and s[0] in "'\"":
        return s[1:-1]
    return s


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"', "/": "/", "0": "\0"}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s:
        return None

    lowered = s.lower()
    if lowered in ("null", "~", "none"):
        return None
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False

    if len(s) >= 2 and s[0] == s[-1] == '"':
        return _unescape_double_quoted(s[1:-1])
    if len(s) >= 2 and s[0] == s[-1] == "'":
        return s[1:-1].replace("''", "'")

    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        return s


def _unescape_double_quoted(s: str) -> str:
    """Process backslash escapes in a double-quoted string."""
    out = []
    i = 0
    while i < len(s):
        if s[i] == "\\" and i + 1 < len(s):
            nxt = s[i + 1]
            # Unknown escape: keep as-is
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
            i += 2
        else:
            out.append(s[i])
            i += 1
    return "".join(out)


# --- Configuration Dataclasses ---


@dataclass
class WordCharsConfig:
    """Characters counted as word characters by word motions."""

    default: str = ALPHANUM
    filetypes: dict[str, str] = field(default_factory=dict)


@dataclass
class CommentLeadersConfig:
    """Single-line comment leaders keyed by filetype."""

    filetypes: dict[str, list[str]] = field(
        default_factory=lambda: {ft: list(leaders) for ft, leaders in COMMENT_LEADERS.items()}
    )


@dataclass
class Config:
    """Complete application configuration."""

    word_chars: WordCharsConfig = field(default_factory=WordCharsConfig)
    comment_leaders: CommentLeadersConfig = field(default_factory=CommentLeadersConfig)


# --- Layered Lookups ---


def lookup_word_characters(config: Config, host: Host) -> str:
    """Buffer-local override, else filetype entry, else the global default."""
    override = host.word_chars_override()
    if override:
        return override
    filetype = host.filetype()
    if filetype and filetype in config.word_chars.filetypes:
        return config.word_chars.filetypes[filetype]
    return config.word_chars.default


def lookup_comment_leaders(config: Config, host: Host) -> list[str]:
    filetype = host.filetype()
    if not filetype:
        return []
    return list(config.comment_leaders.filetypes.get(filetype, []))


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's readline-edit data directory ($HOME/.readline-edit)."""
    return Path.home() / ".readline-edit"


def _looks_like_path(name: str) -> bool:
    return "/" in name or "\\" in name or name.endswith(".yml")


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.readline-edit/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    4. Bundled package configs/<name>.yml
    """
    if _looks_like_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    config_filename = f"{config_name_or_path}.yml"

    user_config = _get_user_data_dir() / "configs" / config_filename
    if user_config.is_file():
        return user_config

    cwd_config = Path.cwd() / "configs" / config_filename
    if cwd_config.is_file():
        return cwd_config

    try:
        config_ref = files("readline_edit.configs").joinpath(config_filename)
        with as_file(config_ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass

    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    """Get list of paths that would be searched for a config name."""
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / config_filename),
        str(Path.cwd() / "configs" / config_filename),
        f"readline_edit.configs/{config_filename} (bundled)",
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None and config_name_or_path != "default":
        if _looks_like_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        search_paths = _get_config_search_paths(config_name_or_path)
        paths_str = "\n  - ".join(search_paths)
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            yaml_data = parse_simple_yaml(f.read())
        _merge_config(config, yaml_data)

    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    # Word characters
    if "word_chars" in data and isinstance(data["word_chars"], dict):
        wc = data["word_chars"]
        if wc.get("default") is not None:
            config.word_chars.default = str(wc["default"])
        if "filetypes" in wc and isinstance(wc["filetypes"], dict):
            for ft, chars in wc["filetypes"].items():
                if chars is not None:
                    config.word_chars.filetypes[ft] = str(chars)

    # Comment leaders; an empty entry disables leaders for that filetype
    if "comment_leaders" in data and isinstance(data["comment_leaders"], dict):
        for ft, leaders in data["comment_leaders"].items():
            if leaders is None:
                config.comment_leaders.filetypes[ft] = []
            elif isinstance(leaders, list):
                config.comment_leaders.filetypes[ft] = [str(x) for x in leaders if x]
            else:
                config.comment_leaders.filetypes[ft] = [str(leaders)]


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
