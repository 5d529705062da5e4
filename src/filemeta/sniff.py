"""MIME type detection for files on disk."""

import logging
import mimetypes
import os

import filetype

from .config import Config

logger = logging.getLogger(__name__)


class FileType:
    """Detected type of a file: its MIME type and usual extension."""

    def __init__(self, mime: str, extension: str | None = None):
        self.mime = mime
        self.extension = extension

    def get_mime_type(self) -> str:
        return self.mime

    def get_extension(self) -> str | None:
        return self.extension

    def __repr__(self) -> str:
        return f"FileType(mime={self.mime!r}, extension={self.extension!r})"

    @classmethod
    def get_from_file(cls, path: str) -> "FileType":
        """
        Detect the type of a file.

        The header bytes are matched against known signatures first. When that
        gives no answer, the type is guessed from the file name, and finally
        Config.DEFAULT_MIME is used.

        Args:
            path: Path of the file to inspect

        Returns:
            Detected file type
        """
        kind = None
        try:
            with open(path, "rb") as f:
                head = f.read(Config.SNIFF_BYTES)
            if head:
                kind = filetype.guess(head)
        except OSError as e:
            logger.warning("Cannot read %s for type detection: %s", path, e)

        if kind is not None:
            logger.debug("Detected %s from content of %s", kind.mime, path)
            return cls(kind.mime, kind.extension)

        mime, _ = mimetypes.guess_type(path)
        if mime:
            logger.debug("Guessed %s from name of %s", mime, path)
            ext = os.path.splitext(path)[1].lstrip(".").lower() or None
            return cls(mime, ext)

        return cls(Config.DEFAULT_MIME)
