# cleantext/service/pipeline.py

"""Main filtering service pipeline."""

import logging
import threading
from typing import Optional

from cleantext.service.config import settings
from cleantext.engine.filter_engine import ProfanityFilterEngine
from cleantext.core.loader import WordListLoader
from cleantext.core.domain import FilterResult
from cleantext.core.exceptions import (
    ConfigurationError,
    InitializationError,
    PipelineError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class FilterService:
    """Singleton service wrapper for the filter engine.

    Manages engine lifecycle and provides thread-safe access to
    the filtering functionality.
    """

    _instance: Optional[ProfanityFilterEngine] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> ProfanityFilterEngine:
        """Returns singleton filter engine instance.

        Returns:
            Initialized ProfanityFilterEngine

        Raises:
            InitializationError: If engine initialization fails
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing filter engine")
                        loader = WordListLoader.get_instance(settings.wordlist_path)
                        cls._instance = ProfanityFilterEngine(
                            words=loader.get_words(),
                            replacements=loader.get_replacements(),
                        )
                        logger.info("Filter engine initialized successfully")

                    except Exception as e:
                        logger.error("Failed to initialize filter engine", exc_info=True)
                        if isinstance(e, InitializationError):
                            raise
                        raise InitializationError(
                            "Filter engine initialization failed"
                        ) from e

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the cached engine and word list."""
        with cls._lock:
            cls._instance = None
            WordListLoader.reset_instance()


def _failed_result(text: str, message: str, error_type: Optional[str] = None) -> FilterResult:
    metadata = {"error": message, "status": "failed"}
    if error_type:
        metadata["error_type"] = error_type
    return FilterResult(original_text=text, censored_text=text, metadata=metadata)


def filter_text(text: str, style=None) -> FilterResult:
    """Main entry point for text filtering.

    Args:
        text: Input text to filter
        style: Censor style; the configured default when None

    Returns:
        FilterResult with censored text and match statistics.
        On failure, returns a result indicating the error safely.
    """
    if not isinstance(text, str):
        logger.error(f"Invalid input type received: {type(text)}")
        return _failed_result(
            "" if text is None else str(text), "Invalid input format", "ValidationError"
        )

    if style is None:
        style = settings.default_censor_style

    try:
        engine = FilterService.get_instance()

        logger.info(
            "Starting filter request",
            extra={"text_length": len(text), "style": str(getattr(style, "value", style))},
        )

        return engine.process(text=text, style=style)

    except ValidationError as e:
        logger.warning(
            f"Rejected filter request: {e}", extra={"text_length": len(text)}
        )
        return _failed_result(text, str(e), type(e).__name__)

    except (InitializationError, ConfigurationError, PipelineError) as e:
        # Known errors, logged with context but internal details kept out of the result
        logger.error(
            f"Known error during filtering: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return _failed_result(
            text, "The filter service encountered a processing error.", type(e).__name__
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in filter pipeline",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return _failed_result(text, "An unexpected system error occurred.")
