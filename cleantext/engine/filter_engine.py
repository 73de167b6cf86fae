# cleantext/engine/filter_engine.py

"""Word-list based profanity filter engine."""

import logging
from typing import Iterable, List, Mapping

from cleantext.engine.matcher import WordMatcher, count_words
from cleantext.core.definitions import CensorStyle
from cleantext.core.domain import FilterResult, CensoredMatch
from cleantext.core.exceptions import (
    InitializationError,
    PipelineError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ProfanityFilterEngine:
    """Lexical profanity filter over a fixed word list.

    Holds the compiled matcher and the style placeholders. Instances keep no
    per-call state, so one engine can serve any number of callers.
    """

    def __init__(
        self, words: Iterable[str], replacements: Mapping[CensorStyle, str]
    ) -> None:
        """Initialize filter engine.

        Args:
            words: Terms to censor
            replacements: Placeholder text for every censor style

        Raises:
            InitializationError: If the matcher or style table cannot be built.
        """
        missing = [s.value for s in CensorStyle if s not in replacements]
        if missing:
            raise InitializationError(f"No placeholder defined for styles: {missing}")

        self._replacements = dict(replacements)
        self._matcher = WordMatcher(words)

        logger.info(
            "Filter engine initialized",
            extra={"term_count": len(self._matcher.words)},
        )

    @property
    def words(self):
        return self._matcher.words

    @staticmethod
    def resolve_style(style) -> CensorStyle:
        """Maps a style or its string value to the enum member.

        Raises:
            ValidationError: If the style is not one of the known values.
        """
        try:
            return CensorStyle.coerce(style)
        except ValueError as e:
            raise ValidationError(f"Unknown censor style: {style!r}") from e

    def replacement_for(self, style) -> str:
        return self._replacements[self.resolve_style(style)]

    def find_matches(self, text: str) -> List[CensoredMatch]:
        return list(self._matcher.iter_matches(text))

    def contains_profanity(self, text: str) -> bool:
        if not text or not text.strip():
            return False
        return self._matcher.search(text) is not None

    def process(self, text: str, style) -> FilterResult:
        """Censors every listed word in the text.

        Args:
            text: Raw input text
            style: Censor style (enum member or its string value)

        Returns:
            FilterResult with censored text and match statistics

        Raises:
            ValidationError: If the style is unknown.
        """
        censor_style = self.resolve_style(style)
        replacement = self._replacements[censor_style]

        if not text.strip():
            return FilterResult.empty(text, style=censor_style)

        try:
            word_count = count_words(text)
            censored_text, matches = self._matcher.substitute(text, replacement)

            # Unique terms in first-occurrence order
            censored_words = list(dict.fromkeys(m.term for m in matches))

        except Exception as e:
            logger.error(
                "Filtering failed",
                exc_info=True,
                extra={"text_length": len(text), "style": censor_style.value},
            )
            raise PipelineError(f"Failed to filter text: {e}") from e

        logger.info(
            "Filtering completed",
            extra={
                "censored_count": len(matches),
                "unique_count": len(censored_words),
                "word_count": word_count,
                "text_length": len(text),
                "style": censor_style.value,
            },
        )

        return FilterResult(
            original_text=text,
            censored_text=censored_text,
            censored_words=censored_words,
            censored_count=len(matches),
            word_count=word_count,
            matches=matches,
            style=censor_style,
        )
