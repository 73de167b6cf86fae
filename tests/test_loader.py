# tests/test_loader.py

import pytest

from cleantext.core.definitions import CensorStyle
from cleantext.core.exceptions import ConfigurationError
from cleantext.core.loader import WordListLoader

STYLES_YAML = """
censor_styles:
  asterisk: "****"
  censored: "[CENSORED]"
  emoji: "X"
"""


def test_packaged_word_list(loader):
    words = loader.get_words()

    assert len(words) == 27
    assert len(set(words)) == len(words)
    assert all(w == w.lower() for w in words)
    assert {"hell", "asshole", "naked"} <= set(words)


def test_packaged_replacements(loader):
    assert dict(loader.get_replacements()) == {
        CensorStyle.ASTERISK: "****",
        CensorStyle.CENSORED: "[CENSORED]",
        CensorStyle.EMOJI: "🤐",
    }


def test_replacements_are_read_only(loader):
    with pytest.raises(TypeError):
        loader.get_replacements()[CensorStyle.EMOJI] = "!"


def test_instance_is_shared():
    assert WordListLoader.get_instance() is WordListLoader.get_instance()


def test_custom_list_is_normalized(write_wordlist):
    path = write_wordlist("words:\n  - Heck\n  - ' darn '\n  - heck\n  - ''\n" + STYLES_YAML)

    loader = WordListLoader(path)

    assert loader.get_words() == ("heck", "darn")
    assert loader.get_replacement(CensorStyle.EMOJI) == "X"


def test_missing_file():
    with pytest.raises(ConfigurationError, match="not found"):
        WordListLoader("/nonexistent/wordlist.yaml")


def test_invalid_yaml(write_wordlist):
    path = write_wordlist("words: [unclosed\n")

    with pytest.raises(ConfigurationError, match="parse"):
        WordListLoader(path)


def test_empty_file(write_wordlist):
    with pytest.raises(ConfigurationError, match="empty"):
        WordListLoader(write_wordlist(""))


def test_missing_section(write_wordlist):
    with pytest.raises(ConfigurationError, match="words"):
        WordListLoader(write_wordlist(STYLES_YAML))


def test_style_without_placeholder(write_wordlist):
    path = write_wordlist("words: [heck]\ncensor_styles:\n  asterisk: '*'\n")

    with pytest.raises(ConfigurationError, match="censored"):
        WordListLoader(path)


def test_blank_terms_only(write_wordlist):
    path = write_wordlist("words: ['', '  ']\n" + STYLES_YAML)

    with pytest.raises(ConfigurationError, match="no terms"):
        WordListLoader(path)
