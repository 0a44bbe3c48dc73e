"""Character classification for word motions.

Only ASCII space and tab count as whitespace. Word characters come from an
explicit set, or from the NON_WHITESPACE_CHARS sentinel, which makes every
non-whitespace character a word character (unix-word-rubout).
"""

from readline_edit.constants import NON_WHITESPACE_CHARS, WHITESPACE


def is_whitespace(c: str) -> bool:
    return c in WHITESPACE


def is_word_char(c: str, word_chars: str) -> bool:
    if word_chars == NON_WHITESPACE_CHARS:
        return not is_whitespace(c)
    return c in word_chars
