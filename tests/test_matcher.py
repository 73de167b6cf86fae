# tests/test_matcher.py

import pytest

from cleantext.core.exceptions import InitializationError
from cleantext.engine.matcher import WordMatcher, count_words


def test_words_are_deduplicated_and_lowercased():
    matcher = WordMatcher(["Damn", "damn", "HELL"])

    assert matcher.words == ("damn", "hell")


def test_empty_word_list_is_rejected():
    with pytest.raises(InitializationError):
        WordMatcher([])


def test_pattern_does_not_depend_on_order():
    text = "an ass and an asshole"
    forward = WordMatcher(["ass", "asshole"]).substitute(text, "#")
    backward = WordMatcher(["asshole", "ass"]).substitute(text, "#")

    assert forward == backward
    assert forward[0] == "an # and an #"


def test_regex_metacharacters_are_escaped():
    matcher = WordMatcher(["c.t"])

    assert matcher.search("cat") is None
    assert matcher.search("a c.t here").term == "c.t"


def test_substitute_reports_matches_in_order():
    text, found = WordMatcher(["kill", "die"]).substitute("Die or KILL", "x")

    assert text == "x or x"
    assert [(m.term, m.start, m.end) for m in found] == [("die", 0, 3), ("kill", 7, 11)]


@pytest.mark.parametrize(
    "text,expected",
    [("", 0), ("   ", 0), ("one", 1), ("a  b   c", 3), ("line\nbreak\ttab", 3)],
)
def test_count_words(text, expected):
    assert count_words(text) == expected
