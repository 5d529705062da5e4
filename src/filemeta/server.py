"""Filemeta MCP Server - file metadata tools using FastMCP."""

import logging

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel

from .file import File
from .utils import get_stat_info, validate_file_path

logger = logging.getLogger(__name__)


class FileDescription(BaseModel):
    path: str
    dir: str
    filename: str
    basename: str
    ext: str | None = None
    mime: str | None = None
    exists: bool
    size_bytes: int = 0
    modified: float | None = None


class DerivedPath(BaseModel):
    source: str
    path: str


# Initialize FastMCP server
mcp = FastMCP("Filemeta")


def _describe(file: File) -> FileDescription:
    info = get_stat_info(file.path)
    return FileDescription(
        path=file.path,
        dir=file.dir,
        filename=file.filename,
        basename=file.basename,
        ext=file.ext,
        mime=file.get_mime() if info["exists"] else None,
        **info,
    )


@mcp.tool()
def describe_file(file_path: str, mime: str | None = None) -> FileDescription:
    """
    Describe a file: its name components, MIME type and size.

    Args:
        file_path: Path to the file
        mime: Known MIME type, skips content detection

    Returns:
        File metadata
    """
    validate_file_path(file_path)
    return _describe(File(file_path, mime=mime))


@mcp.tool()
def derive_path(file_path: str, ext: str | None = None, suffix: str | None = None) -> DerivedPath:
    """
    Build a sibling path from a file path without touching the filesystem.

    Args:
        file_path: Path to start from
        ext: Replace the extension with this one
        suffix: Insert this text before the extension

    Returns:
        The original and the derived path
    """
    validate_file_path(file_path, must_exist=False)
    if ext is None and suffix is None:
        raise ValueError("Either ext or suffix is required")

    derived = file_path
    if suffix is not None:
        derived = File(derived).add_suffix(suffix)
    if ext is not None:
        derived = File(derived).set_ext(ext)

    return DerivedPath(source=file_path, path=derived)


@mcp.tool()
def touch_file(file_path: str) -> FileDescription:
    """
    Create a file or update its modification time, applying default permissions.

    Args:
        file_path: Path to the file

    Returns:
        File metadata after touching
    """
    validate_file_path(file_path, must_exist=False)
    file = File(file_path)
    file.touch()
    logger.info("Touched %s", file.path)
    return _describe(file)


if __name__ == "__main__":
    mcp.run()
