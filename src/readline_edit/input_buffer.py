class InputBuffer:
    """Single-line editable text with a cursor.

    Only offers the relative edits a command line understands: insert at the
    cursor, backspace, delete, and one-column moves. Longer motions and kills
    are built out of these by CommandLineHost.
    """

    def __init__(self, text: str = "", cursor: int | None = None):
        self._text = ""
        self._cursor = 0
        self.set_text(text, cursor)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def insert(self, s: str):
        """Insert text at the cursor and move past it."""
        self._text = self._text[: self._cursor] + s + self._text[self._cursor :]
        self._cursor += len(s)

    def backspace(self) -> bool:
        """Delete the character before the cursor. Returns False at column 0."""
        if self._cursor == 0:
            return False
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1
        return True

    def delete(self) -> bool:
        """Delete the character under the cursor. Returns False at the end."""
        if self._cursor >= len(self._text):
            return False
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
        return True

    def move_left(self) -> bool:
        if self._cursor == 0:
            return False
        self._cursor -= 1
        return True

    def move_right(self) -> bool:
        if self._cursor >= len(self._text):
            return False
        self._cursor += 1
        return True

    def set_text(self, text: str, cursor: int | None = None):
        """Replace the content. The cursor goes to the end unless given."""
        if cursor is None:
            cursor = len(text)
        if not 0 <= cursor <= len(text):
            raise ValueError(f"cursor column {cursor} outside 0..{len(text)}")
        self._text = text
        self._cursor = cursor

    def clear(self) -> str:
        """Clear the buffer and return the previous content."""
        text = self._text
        self._text = ""
        self._cursor = 0
        return text
