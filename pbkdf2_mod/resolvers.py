from __future__ import annotations
import enum
import logging
import re
import sys

from .config import HarnessConfig
from .errors import ArgumentFormatError, ArgumentRangeError
from .hexcodec import hex_to_bytes
from .text_encoding import to_canonical_bytes, to_native_bytes

logger = logging.getLogger(__name__)

MIN_SALT = 0
MAX_SALT = 2**31 - 1  # INT_MAX

# Width of a C int, the type the naive salt is stored in.
NAIVE_SALT_WIDTH = 4

_INTEGER_RE = re.compile(r"\s*(?P<sign>[+-]?)(?P<digits>[0-9]+)\s*")


class Mode(enum.Enum):
    NAIVE = "naive"
    CORRECT = "correct"

    @classmethod
    def from_flag(cls, do_it_right: bool) -> "Mode":
        return cls.CORRECT if do_it_right else cls.NAIVE


def parse_int_arg(name: str, text: str, min_value: int, max_value: int) -> int:
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        raise ArgumentFormatError(name)

    negative = match.group("sign") == "-"
    digits = match.group("digits").lstrip("0") or "0"
    # Longer than both bounds is out of range; int() is never handed such a string.
    if len(digits) > len(str(max(abs(min_value), abs(max_value)))):
        if negative:
            raise ArgumentRangeError(name, min_value, "minimum")
        raise ArgumentRangeError(name, max_value, "maximum")

    value = -int(digits) if negative else int(digits)
    if value < min_value:
        raise ArgumentRangeError(name, min_value, "minimum")
    if value > max_value:
        raise ArgumentRangeError(name, max_value, "maximum")
    return value


def naive_salt_bytes(value: int) -> bytes:
    # Raw in-memory representation of the integer, native byte order.
    return value.to_bytes(NAIVE_SALT_WIDTH, sys.byteorder, signed=True)


def naive_salt_value(salt: bytes) -> int:
    return int.from_bytes(salt, sys.byteorder, signed=True)


def resolve_salt(text: str, mode: Mode) -> bytes:
    if mode is Mode.CORRECT:
        salt = hex_to_bytes(text)
    else:
        salt = naive_salt_bytes(parse_int_arg("salt", text, MIN_SALT, MAX_SALT))

    logger.debug("Salt resolved in %s mode: %d bytes", mode.value, len(salt))
    return salt


def resolve_password(text: str, mode: Mode, config: HarnessConfig | None = None) -> bytes:
    if mode is Mode.CORRECT:
        password = to_canonical_bytes(text)
    else:
        config = config or HarnessConfig()
        password = to_native_bytes(text, config.native_encoding, config.ansi_code_page)

    logger.debug("Password resolved in %s mode: %d bytes", mode.value, len(password))
    return password
