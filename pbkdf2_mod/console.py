from __future__ import annotations
from typing import TextIO


def is_redirected(stream: TextIO) -> bool:
    """True when the stream goes to a file or a pipe instead of a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return True
    try:
        return not isatty()
    except ValueError:
        # closed stream
        return True


def write_text(stream: TextIO, text: str, redirect_encoding: str = "utf-8") -> None:
    """
    Write one piece of text. A terminal gets characters; a redirected stream
    gets the text encoded with redirect_encoding.
    """
    if not is_redirected(stream):
        stream.write(text)
        stream.flush()
        return

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return

    stream.flush()
    buffer.write(text.encode(redirect_encoding, errors="replace"))
    buffer.flush()
