# tests/conftest.py

import pytest

from cleantext.core.loader import WordListLoader
from cleantext.engine.filter_engine import ProfanityFilterEngine
from cleantext.service.pipeline import FilterService


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Each test builds the loader and service from scratch."""
    FilterService.reset()
    yield
    FilterService.reset()


@pytest.fixture
def loader():
    return WordListLoader.get_instance()


@pytest.fixture
def engine(loader):
    return ProfanityFilterEngine(
        words=loader.get_words(), replacements=loader.get_replacements()
    )


@pytest.fixture
def write_wordlist(tmp_path):
    """Writes YAML text to a temporary word list file and returns its path."""

    def _write(content: str):
        path = tmp_path / "wordlist.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
