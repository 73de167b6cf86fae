# cleantext/logic/validators.py

"""Validation for uploaded text files."""

import logging
from pathlib import PurePath
from typing import Optional

from cleantext.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

ACCEPTED_MIME_TYPE = "text/plain"
ACCEPTED_EXTENSION = ".txt"

UPLOAD_REJECTED_MESSAGE = "Please upload a .txt file only"


def validate_upload(filename: str, mime_type: Optional[str]) -> None:
    """Accepts plain text uploads only.

    Browsers that report no type fall back to the file extension.

    Args:
        filename: Name of the uploaded file
        mime_type: Content type reported by the browser

    Raises:
        ValidationError: If the file is not plain text
    """
    if mime_type:
        # Parameters such as "; charset=utf-8" do not change the type
        base_type = mime_type.split(";", 1)[0].strip().lower()
        accepted = base_type == ACCEPTED_MIME_TYPE
    else:
        accepted = PurePath(filename or "").suffix.lower() == ACCEPTED_EXTENSION

    if not accepted:
        logger.warning(
            "Rejected upload", extra={"upload_name": filename, "mime_type": mime_type}
        )
        raise ValidationError(UPLOAD_REJECTED_MESSAGE)


def decode_upload(data: bytes) -> str:
    """Decodes uploaded bytes as UTF-8, dropping a leading byte order mark.

    Raises:
        ValidationError: If the content is not valid UTF-8 text
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Upload is not valid UTF-8", extra={"size": len(data)})
        raise ValidationError("Uploaded file is not valid UTF-8 text") from e
