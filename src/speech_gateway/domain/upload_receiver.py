"""Writes uploaded audio to the transient upload directory."""

import contextlib
import os
import shutil
import uuid
from typing import BinaryIO

from speech_gateway.logging import setup_logging

from .models import UploadedAudio

logger = setup_logging()


class UploadReceiver:
    """Stores incoming uploads under generated names."""

    def __init__(self, upload_dir: str):
        self._upload_dir = upload_dir

    def receive(
        self, data: BinaryIO, original_filename: str, content_type: str | None
    ) -> UploadedAudio:
        """
        Copies an upload stream to disk.

        The local name is a random token unrelated to the original filename;
        the original name is kept on the returned model for extension checks.
        """
        os.makedirs(self._upload_dir, exist_ok=True)
        path = os.path.join(self._upload_dir, uuid.uuid4().hex)

        try:
            with open(path, "wb") as f:
                shutil.copyfileobj(data, f)
        except BaseException:
            logger.exception("Error writing upload", extra={"path": path})
            with contextlib.suppress(FileNotFoundError):
                os.remove(path)
            raise

        uploaded = UploadedAudio(
            path=path,
            original_filename=original_filename,
            content_type=content_type,
            size=os.path.getsize(path),
        )
        logger.info(
            "Upload received",
            extra={
                "original_filename": original_filename,
                "path": path,
                "size": uploaded.size,
                "content_type": content_type,
            },
        )
        return uploaded
