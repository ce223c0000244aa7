from __future__ import annotations
import argparse
import dataclasses
import logging
import sys
from typing import Sequence, TextIO

from pbkdf2_mod.config import HarnessConfig, load_config
from pbkdf2_mod.console import write_text
from pbkdf2_mod.errors import AllocationFailure, ArgumentCountError, HarnessError
from pbkdf2_mod.kdf import (
    MAX_HASH_TYPE,
    MAX_ITERATION_COUNT,
    MIN_HASH_TYPE,
    MIN_ITERATION_COUNT,
    DerivationParameters,
    DerivationResult,
    derive_key,
    hash_algorithm_from_code,
)
from pbkdf2_mod.report import format_duration, format_result, format_salt
from pbkdf2_mod.resolvers import Mode, parse_int_arg, resolve_password, resolve_salt
from pbkdf2_mod.text_encoding import NativeEncoding
from pbkdf2_mod.timing import measure

logger = logging.getLogger("pbkdf2")

USAGE_LINES = (
    "Usage: pbkdf2 <hashType> <salt> <iterationCount> <password> [doItRight]",
    "       hashType: 1=SHA-1, 2=SHA-256, 3=SHA-384, 4 or 5=SHA-512",
    "       doItRight: If present the salt is interpreted as a byte array and",
    "                  the password is converted to UTF-8 before hashing",
    "                  Otherwise the salt is interpreted as an integer and",
    "                  the password is used in the ANSI or UTF-16 encoding",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbkdf2",
        description="Compute PBKDF2 the naive way (integer salt, native password encoding) "
        "or the correct way (byte array salt, UTF-8 password).",
        usage="%(prog)s [--native-encoding {ansi,utf-16}] hashType salt iterationCount password [doItRight]",
    )
    parser.add_argument(
        "--native-encoding",
        choices=[e.value for e in NativeEncoding],
        help="Encoding of the password in naive mode (default: $PBKDF2_NATIVE_ENCODING or utf-16)",
    )
    # Options are only read before hashType; everything after it is data.
    parser.add_argument(
        "values",
        nargs=argparse.REMAINDER,
        metavar="ARG",
        help="hashType salt iterationCount password [doItRight]",
    )
    return parser


def run(values: Sequence[str], config: HarnessConfig, out: TextIO) -> int:
    if len(values) < 4:
        raise ArgumentCountError()

    # Should I do it right or not?
    mode = Mode.from_flag(len(values) >= 5)
    logger.debug("Mode: %s", mode.value)

    hash_type = parse_int_arg("hashType", values[0], MIN_HASH_TYPE, MAX_HASH_TYPE)
    algorithm = hash_algorithm_from_code(hash_type)

    salt = resolve_salt(values[1], mode)

    iteration_count = parse_int_arg("iterationCount", values[2], MIN_ITERATION_COUNT, MAX_ITERATION_COUNT)

    password_text = values[3]
    password = resolve_password(password_text, mode, config)

    params = DerivationParameters(
        algorithm=algorithm,
        salt=salt,
        iteration_count=iteration_count,
        password=password,
    )
    derived_key, elapsed = measure(derive_key, params)
    result = DerivationResult(derived_key=derived_key, elapsed_seconds=elapsed)
    logger.debug("Derivation took %.6f s", result.elapsed_seconds)

    try:
        line = format_result(
            algorithm,
            format_salt(params.salt, mode),
            params.iteration_count,
            password_text,
            result.derived_key,
        )
    except MemoryError as e:
        raise AllocationFailure(len(result.derived_key) * 3, "result text") from e

    write_text(out, line + "\n", config.redirect_encoding)
    write_text(out, format_duration(result.elapsed_seconds) + "\n", config.redirect_encoding)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except HarnessError as e:
        write_text(sys.stderr, f"{e}\n", HarnessConfig().redirect_encoding)
        return e.exit_code

    if args.native_encoding:
        config = dataclasses.replace(config, native_encoding=NativeEncoding.from_name(args.native_encoding))

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args.values, config, sys.stdout)
    except ArgumentCountError as e:
        write_text(sys.stderr, f"{e}\n", config.redirect_encoding)
        for line in USAGE_LINES:
            write_text(sys.stderr, line + "\n", config.redirect_encoding)
        return e.exit_code
    except HarnessError as e:
        write_text(sys.stderr, f"{e}\n", config.redirect_encoding)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
