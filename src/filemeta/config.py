"""Configuration settings for filemeta"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Permissions applied by permissions.set_permissions (octal strings)
    FILE_MODE = int(os.getenv("FILEMETA_FILE_MODE", "664"), 8)
    DIR_MODE = int(os.getenv("FILEMETA_DIR_MODE", "775"), 8)
    # Empty means the group is left untouched
    FILE_GROUP = os.getenv("FILEMETA_FILE_GROUP", "")

    # MIME detection
    DEFAULT_MIME = os.getenv("FILEMETA_DEFAULT_MIME", "application/octet-stream")
    SNIFF_BYTES = int(os.getenv("FILEMETA_SNIFF_BYTES", "261"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
