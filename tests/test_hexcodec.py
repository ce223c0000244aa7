import pytest

from pbkdf2_mod.errors import InvalidHexCharacter
from pbkdf2_mod.hexcodec import bytes_to_hex, hex_to_bytes


def test_bytes_to_hex_format():
    assert bytes_to_hex(b"\x04\xdf\x0b\x92") == "04 DF 0B 92"
    assert bytes_to_hex(b"\x00") == "00"
    assert bytes_to_hex(b"") == ""


def test_hex_to_bytes_mixed_case():
    assert hex_to_bytes("04df0B92") == b"\x04\xdf\x0b\x92"
    assert hex_to_bytes("FFff") == b"\xff\xff"
    assert hex_to_bytes("") == b""


def test_roundtrip_all_byte_values():
    data = bytes(range(256))
    assert hex_to_bytes(bytes_to_hex(data).replace(" ", "")) == data


def test_even_length_hex_normalizes_to_uppercase():
    assert bytes_to_hex(hex_to_bytes("a0b1c2d3e4f5")) == "A0 B1 C2 D3 E4 F5"


def test_odd_length_gets_implicit_leading_zero_nibble():
    out = hex_to_bytes("4df0b92")
    assert len(out) == 4
    assert out[0] >> 4 == 0
    assert out == b"\x04\xdf\x0b\x92"
    assert hex_to_bytes("f") == b"\x0f"
    assert hex_to_bytes("abc") == b"\x0a\xbc"


@pytest.mark.parametrize(
    "text, position, char",
    [
        ("04dg", 4, "g"),
        ("x4", 1, "x"),
        ("12 34", 3, " "),
        ("abc-", 4, "-"),
        ("0G", 2, "G"),
    ],
)
def test_invalid_character_reports_position_and_char(text, position, char):
    with pytest.raises(InvalidHexCharacter) as exc:
        hex_to_bytes(text)
    assert exc.value.position == position
    assert exc.value.char == char
    assert f"'{char}' at position {position}" in str(exc.value)
    assert f'"{text}"' in str(exc.value)


def test_invalid_hex_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_bytes("zz")
