from __future__ import annotations

import codecs
import enum

from .errors import EncodingConversionError

CANONICAL_ENCODING = "utf-8"
UTF16_ENCODING = "utf-16-le"  # no BOM, matches an in-memory wchar_t string
DEFAULT_ANSI_CODE_PAGE = "cp1252"


class NativeEncoding(enum.Enum):
    ANSI = "ansi"
    UTF16 = "utf-16"

    @classmethod
    def from_name(cls, name: str) -> "NativeEncoding":
        key = name.strip().lower().replace("_", "-")
        if key in ("utf16", "unicode", "wide"):
            key = "utf-16"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown native encoding: {name!r} (expected 'ansi' or 'utf-16')")


def _encode(text: str, encoding: str, purpose: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError("Text must be a str.")
    try:
        return text.encode(encoding, errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingConversionError(purpose, f"{e.reason} at position {e.start + 1} ({encoding})") from e


def to_canonical_bytes(text: str) -> bytes:
    return _encode(text, CANONICAL_ENCODING, "password to UTF-8")


def to_native_bytes(
    text: str,
    native_encoding: NativeEncoding = NativeEncoding.UTF16,
    ansi_code_page: str = DEFAULT_ANSI_CODE_PAGE,
) -> bytes:
    """Bytes of the text as it would sit in memory before any conversion."""
    if native_encoding is NativeEncoding.UTF16:
        return _encode(text, UTF16_ENCODING, "password to UTF-16")

    try:
        codecs.lookup(ansi_code_page)
    except LookupError as e:
        raise EncodingConversionError("password to ANSI", f"unknown code page {ansi_code_page!r}") from e
    return _encode(text, ansi_code_page, f"password to ANSI ({ansi_code_page})")
