# cleantext/core/loader.py

"""Word list and censor style loader for the filter engine."""

import yaml
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Tuple, Union

from cleantext.core.definitions import CensorStyle
from cleantext.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_PATH = Path(__file__).parent / "wordlist.yaml"


class WordListLoader:
    """Singleton loader for the word list and style placeholders.

    Loads wordlist.yaml once and caches the immutable tables for the
    application lifecycle.
    """

    _instance: Optional["WordListLoader"] = None

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path else DEFAULT_WORDLIST_PATH
        self._words: Tuple[str, ...] = ()
        self._replacements: Mapping[CensorStyle, str] = MappingProxyType({})
        self._load_config()

    def _load_config(self) -> None:
        """Loads and validates the word list file.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        if not self.path.exists():
            error_msg = f"Word list file not found: {self.path}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse {self.path.name}: {e}") from e
        except OSError as e:
            logger.error(f"Word list loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to read word list: {e}") from e

        if not config or not isinstance(config, dict):
            raise ConfigurationError("Word list file is empty or invalid")

        self._validate_config(config)

        self._words = self._normalize_words(config["words"])
        self._replacements = MappingProxyType(
            {
                style: str(config["censor_styles"][style.value])
                for style in CensorStyle
            }
        )

        logger.info(
            "Word list loaded successfully",
            extra={
                "wordlist_path": str(self.path),
                "word_count": len(self._words),
                "style_count": len(self._replacements),
            },
        )

    @staticmethod
    def _validate_config(config: Dict[str, Any]) -> None:
        """Validates required sections exist and every style has a placeholder.

        Raises:
            ConfigurationError: If required sections are missing.
        """
        required_sections = ["words", "censor_styles"]
        missing = [s for s in required_sections if not config.get(s)]

        if missing:
            error_msg = f"Missing required word list sections: {missing}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        if not isinstance(config["words"], list):
            raise ConfigurationError("'words' must be a list of terms")

        styles = config["censor_styles"]
        if not isinstance(styles, dict):
            raise ConfigurationError("'censor_styles' must map style names to text")

        undefined = [s.value for s in CensorStyle if not styles.get(s.value)]
        if undefined:
            error_msg = f"Censor styles without a placeholder: {undefined}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

    @staticmethod
    def _normalize_words(raw_words) -> Tuple[str, ...]:
        """Lowercases, strips and deduplicates terms, keeping first occurrence."""
        seen = {}
        for word in raw_words:
            term = str(word).strip().lower()
            if term:
                seen.setdefault(term, None)

        if not seen:
            raise ConfigurationError("Word list contains no terms")

        return tuple(seen)

    @classmethod
    def get_instance(cls, path: Optional[Union[str, Path]] = None) -> "WordListLoader":
        """Returns the shared loader, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls(path)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drops the shared loader so the next access reloads from disk."""
        cls._instance = None

    def get_words(self) -> Tuple[str, ...]:
        """Returns the deduplicated lowercase word list."""
        return self._words

    def get_replacements(self) -> Mapping[CensorStyle, str]:
        """Returns the read-only style to placeholder mapping."""
        return self._replacements

    def get_replacement(self, style: CensorStyle) -> str:
        return self._replacements[style]
