"""Permission helpers for files and directories created by filemeta."""

import logging
import os
import shutil
import stat

from .config import Config

logger = logging.getLogger(__name__)


def make_writable(path: str) -> None:
    """
    Give the owner write access to an existing path.

    Directories also get the owner execute bit so entries can be created.

    Args:
        path: Existing file or directory

    Raises:
        PermissionError: If the path is still not writable afterwards
    """
    mode = os.stat(path).st_mode
    new_mode = stat.S_IMODE(mode) | stat.S_IWUSR
    if stat.S_ISDIR(mode):
        new_mode |= stat.S_IXUSR

    logger.debug("Making %s writable: %o -> %o", path, stat.S_IMODE(mode), new_mode)
    os.chmod(path, new_mode)

    if not os.access(path, os.W_OK):
        raise PermissionError(f"Could not make path writable: {path}")


def set_permissions(path: str) -> None:
    """
    Apply the configured default permissions to a path.

    Files get Config.FILE_MODE, directories Config.DIR_MODE. When
    Config.FILE_GROUP is set the group is changed as well.

    Args:
        path: Existing file or directory
    """
    mode = Config.DIR_MODE if os.path.isdir(path) else Config.FILE_MODE
    current = stat.S_IMODE(os.stat(path).st_mode)
    if current != mode:
        logger.debug("Setting mode of %s to %o", path, mode)
        os.chmod(path, mode)

    if Config.FILE_GROUP:
        shutil.chown(path, group=Config.FILE_GROUP)
