"""Minimal utilities for the filemeta MCP server."""

import os
from pathlib import Path
from typing import Any


def validate_file_path(file_path: str, must_exist: bool = True) -> None:
    """
    Validate file path for security and existence.

    Args:
        file_path: Path to validate
        must_exist: Require the path to exist

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If path is invalid or unsafe
    """
    if not file_path or not isinstance(file_path, str):
        raise ValueError("Invalid file path")

    path = Path(file_path)

    # Basic security: prevent directory traversal
    if ".." in path.parts:
        raise ValueError("Directory traversal not allowed")

    if must_exist and not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if path.exists() and path.is_dir():
        raise ValueError("Path must point to a file, not a directory")


def get_stat_info(file_path: str) -> dict[str, Any]:
    """
    Get size and modification time of a path.

    Args:
        file_path: Path to the file

    Returns:
        Stat fields, zeroed when the file does not exist
    """
    if not os.path.exists(file_path):
        return {"exists": False, "size_bytes": 0, "modified": None}

    stat = os.stat(file_path)
    return {
        "exists": True,
        "size_bytes": stat.st_size,
        "modified": stat.st_mtime,
    }
