import pytest

from pbkdf2_mod.config import HarnessConfig, load_config
from pbkdf2_mod.errors import ConfigError
from pbkdf2_mod.text_encoding import NativeEncoding


def test_defaults():
    cfg = load_config({})
    assert cfg == HarnessConfig()
    assert cfg.native_encoding is NativeEncoding.UTF16
    assert cfg.ansi_code_page == "cp1252"
    assert cfg.redirect_encoding == "utf-8"
    assert cfg.log_level == "WARNING"


def test_reads_environment():
    cfg = load_config({
        "PBKDF2_NATIVE_ENCODING": "ansi",
        "PBKDF2_ANSI_CODE_PAGE": "cp850",
        "PBKDF2_REDIRECT_ENCODING": "utf-16-le",
        "PBKDF2_LOG_LEVEL": "debug",
    })
    assert cfg.native_encoding is NativeEncoding.ANSI
    assert cfg.ansi_code_page == "cp850"
    assert cfg.redirect_encoding == "utf-16-le"
    assert cfg.log_level == "DEBUG"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PBKDF2_NATIVE_ENCODING", "ansi")
    assert load_config().native_encoding is NativeEncoding.ANSI


@pytest.mark.parametrize("env", [
    {"PBKDF2_NATIVE_ENCODING": "ebcdic"},
    {"PBKDF2_ANSI_CODE_PAGE": "cp-nope"},
    {"PBKDF2_REDIRECT_ENCODING": "nope"},
    {"PBKDF2_LOG_LEVEL": "LOUD"},
])
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        load_config(env)


def test_config_is_frozen():
    cfg = HarnessConfig()
    with pytest.raises(AttributeError):
        cfg.log_level = "DEBUG"
