"""Tests for logging setup."""

import logging
import sys

from filemeta.logging_config import setup_logging


def test_setup_logging_sets_package_level():
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        logger = setup_logging("debug")
        assert logger.name == "filemeta"
        assert logger.level == logging.DEBUG

        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert added[0].stream is sys.stderr
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)
        logging.getLogger("filemeta").setLevel(logging.NOTSET)
