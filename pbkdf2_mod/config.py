from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError
from .text_encoding import DEFAULT_ANSI_CODE_PAGE, NativeEncoding

ENV_NATIVE_ENCODING = "PBKDF2_NATIVE_ENCODING"
ENV_ANSI_CODE_PAGE = "PBKDF2_ANSI_CODE_PAGE"
ENV_REDIRECT_ENCODING = "PBKDF2_REDIRECT_ENCODING"
ENV_LOG_LEVEL = "PBKDF2_LOG_LEVEL"


@dataclass(frozen=True)
class HarnessConfig:
    # How a naive-mode password becomes bytes. UTF-16 is what a wide-character
    # command line hands over; ANSI is the legacy single-byte code page.
    native_encoding: NativeEncoding = NativeEncoding.UTF16
    ansi_code_page: str = DEFAULT_ANSI_CODE_PAGE
    # Encoding of the bytes written when stdout/stderr is a file or a pipe.
    redirect_encoding: str = "utf-8"
    log_level: str = "WARNING"


def _check_codec(name: str, env_name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"{env_name}: unknown encoding {name!r}") from e
    return name


def load_config(environ: Mapping[str, str] | None = None) -> HarnessConfig:
    env = os.environ if environ is None else environ
    defaults = HarnessConfig()

    native = defaults.native_encoding
    raw_native = env.get(ENV_NATIVE_ENCODING)
    if raw_native:
        try:
            native = NativeEncoding.from_name(raw_native)
        except ValueError as e:
            raise ConfigError(f"{ENV_NATIVE_ENCODING}: {e}") from e

    code_page = _check_codec(env.get(ENV_ANSI_CODE_PAGE) or defaults.ansi_code_page, ENV_ANSI_CODE_PAGE)
    redirect = _check_codec(env.get(ENV_REDIRECT_ENCODING) or defaults.redirect_encoding, ENV_REDIRECT_ENCODING)

    level = (env.get(ENV_LOG_LEVEL) or defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_LOG_LEVEL}: unknown log level {level!r}")

    return HarnessConfig(
        native_encoding=native,
        ansi_code_page=code_page,
        redirect_encoding=redirect,
        log_level=level,
    )
