# cleantext/logic/presentation.py

"""Display helpers for filter results."""

import html
from typing import Dict

from cleantext.core.domain import FilterResult

HIGHLIGHT_TEMPLATE = (
    '<mark style="background-color:#fecaca;color:#991b1b;'
    'padding:0 0.25rem;border-radius:0.25rem">{}</mark>'
)


def highlight_placeholders(censored_text: str, replacement: str) -> str:
    """Escapes text for HTML and marks every placeholder occurrence."""
    escaped_text = html.escape(censored_text)
    if not replacement:
        return escaped_text

    escaped_placeholder = html.escape(replacement)
    return escaped_text.replace(
        escaped_placeholder, HIGHLIGHT_TEMPLATE.format(escaped_placeholder)
    )


def format_stats(result: FilterResult) -> Dict[str, str]:
    """Statistic labels and values shown above the filtered text."""
    return {
        "Total Words": str(result.word_count),
        "Words Censored": str(result.censored_count),
        "Unique Bad Words": str(len(result.censored_words)),
        "Filtered": f"{result.filtered_percentage}%",
    }
