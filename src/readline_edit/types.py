import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    line: int | None  # one-based; None on a command line
    col: int  # zero-based character index


@dataclass
class EditEvent:
    command: str
    ts: float
    before: Position
    after: Position
    text_preview: str


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)


def safe_text_preview(s: str, max_len: int = 120) -> str:
    # Escape tabs and newlines; keep it readable
    s = s.replace("\t", "\\t").replace("\n", "\\n")
    if len(s) > max_len:
        s = s[:max_len] + "\u2026"
    return s