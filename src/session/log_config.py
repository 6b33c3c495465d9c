"""Logging setup for the polynomial session CLI."""

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.WARNING,
    format_string: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """Configures basic logging to stdout (or the given stream)."""
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=stream or sys.stdout,
        force=True,
    )
