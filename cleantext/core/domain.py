# cleantext/core/domain.py

"""Domain models for filtering results."""

import math
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from cleantext.core.definitions import CensorStyle


@dataclass(frozen=True)
class CensoredMatch:
    """Represents a single occurrence of a listed word.

    Attributes:
        term: Matched text, lowercased
        start: Starting character position in original text
        end: Ending character position in original text
    """

    term: str
    start: int
    end: int


@dataclass
class FilterResult:
    """Result object returned by the filter engine.

    Attributes:
        original_text: Unmodified input text
        censored_text: Text with every match replaced by the style placeholder
        censored_words: Unique matched terms in first-occurrence order
        censored_count: Total number of matches, duplicates included
        word_count: Number of whitespace-separated tokens in the input
        matches: Individual occurrences with their offsets
        style: Censor style used for replacement
        metadata: Additional processing information
    """

    original_text: str
    censored_text: str
    censored_words: List[str] = field(default_factory=list)
    censored_count: int = 0
    word_count: int = 0
    matches: List[CensoredMatch] = field(default_factory=list)
    style: Optional[CensorStyle] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def filtered_percentage(self) -> int:
        """Share of censored matches against total words, as a whole percent.

        Not clamped: repeated words joined by punctuation can push it past 100.
        """
        if not self.word_count:
            return 0
        # Half-up rounding, so 12.5 reads as 13
        return math.floor(self.censored_count / self.word_count * 100 + 0.5)

    @property
    def is_clean(self) -> bool:
        return self.censored_count == 0

    @classmethod
    def empty(cls, text: str, style: Optional[CensorStyle] = None) -> "FilterResult":
        """Zero result for input that has nothing to scan."""
        return cls(original_text=text, censored_text=text, style=style)
