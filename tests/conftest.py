import pytest

from pbkdf2_mod import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        config.ENV_NATIVE_ENCODING,
        config.ENV_ANSI_CODE_PAGE,
        config.ENV_REDIRECT_ENCODING,
        config.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(name, raising=False)
