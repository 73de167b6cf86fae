# cleantext/core/definitions.py

"""Censor style constants for profanity replacement."""

from enum import Enum


class CensorStyle(str, Enum):
    """Selectable placeholder styles for censored words."""

    ASTERISK = "asterisk"
    CENSORED = "censored"
    EMOJI = "emoji"

    @classmethod
    def coerce(cls, value) -> "CensorStyle":
        """Returns the enum member for a member or its string value.

        Raises:
            ValueError: If the value names no known style.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


DEFAULT_CENSOR_STYLE = CensorStyle.CENSORED
