"""Logging configuration."""

import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger with a single stderr handler.

    Call this once, before the first log record is emitted.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    logging.captureWarnings(True)
