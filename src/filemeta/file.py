"""File value object: path metadata plus permission-aware open and touch."""

import logging
import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Callable

from . import permissions
from .exceptions import FileErrorKind, FileIOError
from .sniff import FileType

logger = logging.getLogger(__name__)

READ_MODE_CHARS = "r+"
WRITE_MODE_CHARS = "waxc+"


@dataclass(frozen=True)
class PathParts:
    """Lexical components of a path."""

    path: str
    dir: str
    filename: str
    basename: str
    ext: str | None


def parse_path(path: str | os.PathLike) -> PathParts:
    """
    Split a path into directory, file name, base name and extension.

    The split follows POSIX dirname/basename: trailing slashes are ignored
    and a bare file name gets an empty directory rather than ".". The
    extension is whatever follows the last "." of the file name, lowercased.

    Args:
        path: Path to split; the filesystem is not consulted

    Returns:
        The parsed components

    Raises:
        ValueError: If the path is empty
    """
    path = os.fspath(path)
    if not path or not isinstance(path, str):
        raise ValueError("Invalid file path")

    directory, filename = posixpath.split(path.rstrip("/") or "/")
    if directory == ".":
        directory = ""

    extpos = filename.rfind(".")
    if extpos >= 0:
        ext = filename[extpos + 1 :].lower()
        basename = filename[:extpos]
    else:
        ext = None
        basename = filename

    return PathParts(path=path, dir=directory, filename=filename, basename=basename, ext=ext)


def _join(directory: str, name: str) -> str:
    if not directory:
        return name
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


class File:
    """
    A path on disk and the metadata derived from it.

    All name components are computed once at construction. The MIME type is
    either given up front or detected on the first call to get_mime() and
    cached for the lifetime of the object. The cache is not guarded, so an
    instance shared between threads needs external synchronization.
    """

    def __init__(
        self,
        path: str | os.PathLike,
        mime: str | None = None,
        sniffer: Callable[[str], Any] | None = None,
    ):
        self._parts = parse_path(path)
        self._mime = mime or None
        self._sniffer = sniffer or FileType.get_from_file

    @property
    def path(self) -> str:
        return self._parts.path

    @property
    def dir(self) -> str:
        """Directory containing the file, empty when the path has none."""
        return self._parts.dir

    @property
    def filename(self) -> str:
        """File name without the directory."""
        return self._parts.filename

    @property
    def basename(self) -> str:
        """File name without the extension."""
        return self._parts.basename

    @property
    def ext(self) -> str | None:
        """Lowercased extension, or None when the file name has no dot."""
        return self._parts.ext

    def set_ext(self, ext: str) -> str:
        """Return the path of this file with a different extension."""
        return _join(self.dir, f"{self.basename}.{ext}")

    def add_suffix(self, suffix: str) -> str:
        """Return the path of this file with a suffix added before the extension."""
        name = self.basename + suffix
        if self.ext:
            name += "." + self.ext
        return _join(self.dir, name)

    def get_mime(self) -> str:
        """Return the MIME type, detecting it on first use."""
        if not self._mime:
            # Sniff the file itself; the path already includes the file name
            file_type = self._sniffer(self.path)
            self._mime = file_type.get_mime_type()
            logger.debug("Resolved MIME type of %s: %s", self.path, self._mime)
        return self._mime

    def touch(self) -> None:
        """Create the file or update its modification time, then fix its permissions."""
        if os.path.exists(self.path) and not os.access(self.path, os.W_OK):
            permissions.make_writable(self.path)

        Path(self.path).touch()
        permissions.set_permissions(self.path)

    def set_permissions(self) -> None:
        """Apply the default permissions to the file."""
        permissions.set_permissions(self.path)

    def open(self, mode: str = "r") -> IO:
        """
        Open the file, raising a descriptive error when that fails.

        Modes follow fopen: r, w, a and x with optional + and b/t, plus c
        (open for writing, create when missing, never truncate). The caller
        owns the returned handle.

        Args:
            mode: The file opening mode

        Returns:
            The opened file object

        Raises:
            FileIOError: When opening the file failed
        """
        try:
            return self._open(mode)
        except (OSError, ValueError) as e:
            raise self._open_error(mode) from e

    def _open(self, mode: str) -> IO:
        if "c" not in mode:
            return open(self.path, mode)

        if mode.count("c") != 1 or set(mode) - set("c+bt"):
            raise ValueError(f"invalid mode: '{mode}'")

        flags = os.O_CREAT | (os.O_RDWR if "+" in mode else os.O_WRONLY)
        fd = os.open(self.path, flags, 0o666)
        fd_mode = ("r+" if "+" in mode else "w") + ("b" if "b" in mode else "")
        try:
            return os.fdopen(fd, fd_mode)
        except Exception:
            os.close(fd)
            raise

    def _open_error(self, mode: str) -> FileIOError:
        read = any(c in mode for c in READ_MODE_CHARS)
        write = any(c in mode for c in WRITE_MODE_CHARS)

        if "x" in mode and os.path.exists(self.path):
            return FileIOError(f"File already exists: {self.path}", FileErrorKind.EXISTS, self.path)
        if write and not os.access(self.path, os.W_OK):
            return FileIOError(f"File is not writable: {self.path}", FileErrorKind.NOT_WRITABLE, self.path)
        if read and not os.access(self.path, os.R_OK):
            return FileIOError(f"File is not readable: {self.path}", FileErrorKind.NOT_READABLE, self.path)
        return FileIOError(f"Invalid mode for opening file: {mode}", FileErrorKind.INVALID_MODE, self.path)

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"File({self.path!r})"
