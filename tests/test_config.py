# tests/test_config.py

import pytest
from pydantic import ValidationError

from cleantext.core.definitions import CensorStyle
from cleantext.service.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env or exported variables out of these tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "CLEANTEXT_DEFAULT_CENSOR_STYLE",
        "CLEANTEXT_WORDLIST_PATH",
        "CLEANTEXT_PROCESSING_DELAY_SECONDS",
        "CLEANTEXT_DOWNLOAD_FILENAME",
        "CLEANTEXT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings()

    assert s.default_censor_style is CensorStyle.CENSORED
    assert s.processing_delay_seconds == 0.5
    assert s.download_filename == "cleaned-text.txt"
    assert s.wordlist_path is None
    assert s.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLEANTEXT_DEFAULT_CENSOR_STYLE", "emoji")
    monkeypatch.setenv("CLEANTEXT_PROCESSING_DELAY_SECONDS", "0")
    monkeypatch.setenv("CLEANTEXT_LOG_LEVEL", "debug")

    s = Settings()

    assert s.default_censor_style is CensorStyle.EMOJI
    assert s.processing_delay_seconds == 0
    assert s.log_level == "DEBUG"


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("CLEANTEXT_DOWNLOAD_FILENAME=clean.txt\n")

    assert Settings().download_filename == "clean.txt"


@pytest.mark.parametrize(
    "name,value",
    [
        ("CLEANTEXT_DEFAULT_CENSOR_STYLE", "stars"),
        ("CLEANTEXT_PROCESSING_DELAY_SECONDS", "-1"),
        ("CLEANTEXT_LOG_LEVEL", "LOUD"),
        ("CLEANTEXT_DOWNLOAD_FILENAME", "   "),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()
