from __future__ import annotations
import math

from .hexcodec import bytes_to_hex
from .kdf import HashAlgorithm
from .resolvers import Mode, naive_salt_value


def format_salt(salt: bytes, mode: Mode) -> str:
    if mode is Mode.CORRECT:
        return bytes_to_hex(salt)
    return str(naive_salt_value(salt))


def format_result(
    algorithm: HashAlgorithm,
    salt_text: str,
    iteration_count: int,
    password_text: str,
    derived_key: bytes,
) -> str:
    return (
        f"HashType: {algorithm.value}, Salt: {salt_text}, IterationCount: {iteration_count}, "
        f"Password: '{password_text}', PBKDF2: {bytes_to_hex(derived_key)}"
    )


def duration_ms(seconds: float) -> int:
    # Half away from zero, not banker's rounding.
    return int(math.floor(max(seconds, 0.0) * 1000.0 + 0.5))


def format_duration(seconds: float) -> str:
    return f"Duration: {duration_ms(seconds)} ms"
