"""Word and line boundary scanning.

All positions are cursor columns: zero-based character indices, where a line
of N characters has columns 0..N. Nothing here mutates the line.
"""

from readline_edit.chars import is_whitespace, is_word_char
from readline_edit.constants import ALPHANUM


def leading_whitespace_end(line: str) -> int:
    """Return the cursor column just past the line's leading whitespace."""
    i = 0
    while i < len(line) and is_whitespace(line[i]):
        i += 1
    return i


def trailing_whitespace_start(line: str) -> int:
    """Return the cursor column just before the line's trailing whitespace."""
    i = len(line)
    while i > 0 and is_whitespace(line[i - 1]):
        i -= 1
    return i


def scan(line: str, start: int, direction: int, word_chars: str) -> int:
    """Scan from `start` in `direction` (+1 or -1) to the next word boundary.

    Readline semantics: whitespace is skipped until something else has been
    consumed, and a run of word characters ends at the first non-word
    character. A run of symbols is consumed like a word when symbols are not
    word characters. Backward scans stop at the end of the leading
    whitespace, forward scans at the start of the trailing whitespace.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    length = len(line)
    if not 0 <= start <= length:
        raise ValueError(f"cursor column {start} outside 0..{length}")

    if direction < 0:
        early_exit = leading_whitespace_end(line)
    else:
        early_exit = trailing_whitespace_start(line)

    # Index of the character the cursor would move over next
    offset = -1 if direction < 0 else 0

    consumed_word_char = False
    consumed_non_whitespace = False
    i = start
    while 0 <= i + offset < length:
        c = line[i + offset]
        word = is_word_char(c, word_chars)
        space = is_whitespace(c)
        if (space and consumed_non_whitespace) or (not word and consumed_word_char):
            break

        i += direction
        consumed_word_char = consumed_word_char or word
        consumed_non_whitespace = consumed_non_whitespace or not space

        if i == early_exit:
            return i
    return i


def forward_word_cursor(line: str, start: int, word_chars: str = ALPHANUM) -> int:
    return scan(line, start, 1, word_chars)


def backward_word_cursor(line: str, start: int, word_chars: str = ALPHANUM) -> int:
    return scan(line, start, -1, word_chars)
