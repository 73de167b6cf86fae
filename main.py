# main.py

"""Streamlit web UI for the CleanText profanity filter.

Provides a simple interface to paste or upload text, censor listed words
with a chosen placeholder style, and download the cleaned version.
"""

import time
import logging

import streamlit as st

from cleantext.core.definitions import CensorStyle
from cleantext.core.exceptions import ValidationError
from cleantext.engine.matcher import count_words
from cleantext.logging_config import configure_logging
from cleantext.logic.presentation import format_stats, highlight_placeholders
from cleantext.logic.validators import decode_upload, validate_upload
from cleantext.service.config import settings
from cleantext.service.pipeline import FilterService, filter_text

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def _init_state():
    st.session_state.setdefault("input_text", "")
    st.session_state.setdefault("result", None)
    st.session_state.setdefault("censor_style", settings.default_censor_style)
    st.session_state.setdefault("upload_key", 0)


def _load_upload():
    """Copies an uploaded .txt file into the input box."""
    uploaded = st.session_state.get(f"upload_{st.session_state.upload_key}")
    if uploaded is None:
        return

    try:
        validate_upload(uploaded.name, uploaded.type)
        st.session_state.input_text = decode_upload(uploaded.getvalue())
        st.session_state.upload_error = None
        logger.info("Loaded uploaded file", extra={"size": uploaded.size})
    except ValidationError as e:
        st.session_state.upload_error = str(e)


def _reset():
    st.session_state.input_text = ""
    st.session_state.result = None
    st.session_state.upload_error = None
    # A fresh key clears the uploader widget
    st.session_state.upload_key += 1


def _render_style_settings():
    engine = FilterService.get_instance()
    with st.expander("Censoring Style", icon="⚙️"):
        st.radio(
            "Replace censored words with",
            options=list(CensorStyle),
            format_func=lambda s: f"{engine.replacement_for(s)} ({s.value})",
            key="censor_style",
            horizontal=True,
        )


def _render_result(result):
    stats = format_stats(result)
    for col, (label, value) in zip(st.columns(len(stats)), stats.items()):
        col.metric(label, value)

    st.subheader("Original Text")
    st.caption(f"{result.word_count} words")
    with st.container(height=260):
        st.text(result.original_text)

    header, download = st.columns([4, 1])
    header.subheader("Filtered Text")
    download.download_button(
        "Download",
        data=result.censored_text,
        file_name=settings.download_filename,
        mime="text/plain",
        icon="⬇️",
    )

    replacement = FilterService.get_instance().replacement_for(result.style)
    with st.container(height=260):
        st.html(
            '<p style="white-space:pre-wrap">'
            + highlight_placeholders(result.censored_text, replacement)
            + "</p>"
        )

    if result.censored_words:
        st.subheader(f"Detected Bad Words ({len(result.censored_words)})")
        st.markdown(" ".join(f"`{word}`" for word in result.censored_words))

    if result.is_clean:
        st.success(
            "**Text is Clean!** No profanity or inappropriate content detected.",
            icon="🛡️",
        )


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts text typed or
    uploaded by the user, invokes the filter pipeline, and displays the
    filtered output along with match statistics.
    """
    st.set_page_config(page_title="CleanText", page_icon="🛡️")
    _init_state()

    st.title("CleanText")
    st.caption("Smart Profanity Filter")

    try:
        _render_style_settings()
    except Exception:
        st.error("The filter could not be started. Check the word list configuration.")
        logger.error("Filter engine unavailable", exc_info=True)
        return

    st.text_area(
        "Enter Text to Filter",
        key="input_text",
        height=220,
        placeholder="Paste your text here or upload a file...",
    )
    input_text = st.session_state.input_text
    words_col, chars_col = st.columns(2)
    words_col.caption(f"Words: {count_words(input_text)}")
    chars_col.caption(f"Characters: {len(input_text)}")

    st.file_uploader(
        "Upload .txt file",
        type=["txt"],
        key=f"upload_{st.session_state.upload_key}",
        on_change=_load_upload,
    )
    if st.session_state.get("upload_error"):
        st.error(st.session_state.upload_error)

    reset_col, submit_col = st.columns(2)
    reset_col.button("Reset", icon="↺", on_click=_reset, use_container_width=True)
    submitted = submit_col.button(
        "Filter Text",
        type="primary",
        icon="🛡️",
        disabled=not input_text.strip(),
        use_container_width=True,
    )

    if submitted:
        with st.spinner("Processing..."):
            # Visual feedback only; the result does not depend on it
            time.sleep(settings.processing_delay_seconds)
            result = filter_text(input_text, st.session_state.censor_style)

        if "error" in result.metadata:
            st.error(f"Filtering failed: {result.metadata['error']}")
            logger.error(
                "Filtering returned error status",
                extra={"status": "failed", "text_length": len(input_text)},
            )
            st.session_state.result = None
        else:
            st.session_state.result = result
            logger.info(
                f"Filtering successful: {result.censored_count} words censored",
                extra={"text_length": len(input_text)},
            )

    if st.session_state.result is not None:
        st.markdown("---")
        _render_result(st.session_state.result)

    st.markdown("---")
    st.caption(
        "CleanText - Advanced text filtering with privacy-first processing. "
        "Your text is processed locally and never sent to any server."
    )


if __name__ == "__main__":
    main()
