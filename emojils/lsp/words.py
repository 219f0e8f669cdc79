"""Word extraction helpers used by hover and completion."""

import re

# Trailing run of non-whitespace at the very end of a string
TRAILING_TOKEN = re.compile(r"\S+\Z")
WHITESPACE = re.compile(r"\s")
# ASCII words of two letters or more; non-ASCII letters do not count as
# word characters, so "éclair" yields "clair"
ALPHA_WORD = re.compile(r"\b[a-zA-Z]{2,}", re.ASCII)


def word_at_position(line: str, offset: int) -> str:
    """
    Return the run of non-whitespace characters around offset.

    The start is found by scanning line[:offset + 1] backwards for the last
    whitespace, the end by scanning forward from offset for the first one.
    If offset sits on whitespace the result is usually empty.

    Never raises: offsets outside 0..len(line) give an empty string.
    """
    if offset < 0 or offset > len(line):
        return ""

    prefix = line[: offset + 1]
    match = TRAILING_TOKEN.search(prefix)
    start = match.start() if match else len(prefix)

    match = WHITESPACE.search(line, offset)
    end = match.start() if match else len(line)

    return line[start:end]


def last_word(text: str) -> str | None:
    """Return the last alphabetic word (2+ letters) in text, if any."""
    words = ALPHA_WORD.findall(text)
    if not words:
        return None
    return words[-1]
