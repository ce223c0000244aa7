from __future__ import annotations

from .errors import AllocationFailure, InvalidHexCharacter

HEX_DIGITS = "0123456789ABCDEF"


def _hex_char_value(ch: str) -> int:
    # 255 marks "not a hex digit"
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return 255


def bytes_to_hex(data: bytes) -> str:
    """Uppercase hex digits, one space between bytes, no trailing separator."""
    return " ".join(HEX_DIGITS[b >> 4] + HEX_DIGITS[b & 0x0F] for b in bytes(data))


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hex text into bytes.

    An odd-length string behaves as if it had an implicit leading zero nibble,
    so the result is always ceil(len(text) / 2) bytes long.
    """
    is_odd = (len(text) & 1) != 0
    size = (len(text) >> 1) + (1 if is_odd else 0)

    try:
        result = bytearray(size)
    except MemoryError as e:
        raise AllocationFailure(size, "hex conversion byte array") from e

    is_low_nibble = is_odd
    byte_value = 0
    index = 0

    for pos, ch in enumerate(text, start=1):
        value = _hex_char_value(ch)
        if value > 15:
            raise InvalidHexCharacter(pos, ch, text)

        if is_low_nibble:
            result[index] = byte_value | value
            index += 1
            byte_value = 0
        else:
            byte_value = value << 4

        is_low_nibble = not is_low_nibble

    return bytes(result)
