# cleantext/engine/matcher.py

"""Compiled whole-word matcher for the profanity word list."""

import logging
import re
from typing import Iterable, Iterator, List, Optional, Pattern, Tuple

from cleantext.core.domain import CensoredMatch
from cleantext.core.exceptions import InitializationError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Counts tokens separated by runs of whitespace, ignoring empty ones."""
    return len([token for token in _WHITESPACE.split(text) if token])


class WordMatcher:
    """Single alternation regex over every listed word.

    The pattern is compiled once on construction and reused for every scan.
    Word boundaries are ASCII so accented letters count as separators, the
    same as in browser regular expressions.
    """

    def __init__(self, words: Iterable[str]):
        self.words: Tuple[str, ...] = tuple(dict.fromkeys(w.lower() for w in words if w))

        if not self.words:
            raise InitializationError("Cannot build a matcher from an empty word list")

        self._regex: Pattern = self._compile(self.words)
        logger.debug(
            "WordMatcher compiled", extra={"term_count": len(self.words)}
        )

    @staticmethod
    def _compile(words: Tuple[str, ...]) -> Pattern:
        # Longest first; boundaries make the order irrelevant to the result
        sorted_words = sorted(words, key=len, reverse=True)

        # \b(?:word1|word2|word3)\b
        pattern_str = r"\b(?:" + "|".join(re.escape(w) for w in sorted_words) + r")\b"

        try:
            return re.compile(pattern_str, re.IGNORECASE | re.ASCII)
        except re.error as e:
            logger.error(f"Failed to compile word list regex: {e}")
            raise InitializationError("Word list produced an invalid pattern") from e

    @property
    def pattern(self) -> Pattern:
        return self._regex

    def iter_matches(self, text: str) -> Iterator[CensoredMatch]:
        """Yields non-overlapping matches from left to right."""
        for match in self._regex.finditer(text):
            yield CensoredMatch(
                term=match.group(0).lower(), start=match.start(), end=match.end()
            )

    def search(self, text: str) -> Optional[CensoredMatch]:
        """Returns the leftmost match, or None."""
        match = self._regex.search(text)
        if not match:
            return None
        return CensoredMatch(
            term=match.group(0).lower(), start=match.start(), end=match.end()
        )

    def substitute(self, text: str, replacement: str) -> Tuple[str, List[CensoredMatch]]:
        """Replaces every match with the literal replacement in one pass.

        Returns:
            Tuple of the substituted text and the matches that were replaced
        """
        found: List[CensoredMatch] = []

        # Callable replacement keeps the placeholder literal (no group refs)
        def replace(match) -> str:
            found.append(
                CensoredMatch(
                    term=match.group(0).lower(), start=match.start(), end=match.end()
                )
            )
            return replacement

        return self._regex.sub(replace, text), found

    def __repr__(self):
        return f"<WordMatcher terms={len(self.words)}>"
