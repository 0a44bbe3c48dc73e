import time

from readline_edit.types import EditEvent, safe_text_preview, ts_str

LOG_FILE = "readline_edit.log"


class DebugLogger:
    """Optional debug log of executed commands."""

    def __init__(self, path: str = LOG_FILE):
        self.enabled = False
        self.path = path
        self._fh = None

    def start(self):
        self._fh = open(self.path, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        self._fh.write(sep)
        self._fh.flush()

    def stop(self):
        self.enabled = False
        if self._fh:
            self._fh.close()
        self._fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log_event(self, ev: EditEvent):
        if not self.enabled or not self._fh:
            return
        self._fh.write(
            f"{ts_str(ev.ts)} {ev.command:<24} | "
            f"{_fmt_pos(ev.before)} -> {_fmt_pos(ev.after)} | {safe_text_preview(ev.text_preview)}\n"
        )
        self._fh.flush()

    def log_message(self, text: str):
        if not self.enabled or not self._fh:
            return
        for line in text.split("\n"):
            self._fh.write(f"{ts_str(time.time())} | {line}\n")
        self._fh.flush()


def _fmt_pos(pos) -> str:
    if pos.line is None:
        return f"col {pos.col}"
    return f"{pos.line}:{pos.col}"
