from fastapi import UploadFile
from typing import Optional
import base64
import logging

logger = logging.getLogger(__name__)


def encode_upload(upload: Optional[UploadFile]) -> Optional[str]:
    """Read an uploaded file and return its content as base64 text."""
    if upload is None:
        return None

    content = upload.file.read()
    if not content:
        return None

    logger.debug(f"Encoding uploaded image {upload.filename} ({len(content)} bytes)")
    return base64.b64encode(content).decode("ascii")
