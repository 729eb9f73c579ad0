# app/logging_setup.py
# Role: One-time logging configuration for the web app.

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logger to write to stdout.

    Safe to call more than once (e.g. one app per test): handlers are only
    added the first time, later calls just adjust the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)],
        )
    root.setLevel(level)
