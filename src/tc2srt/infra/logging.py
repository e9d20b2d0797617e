"""Logging setup for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "tc2srt-rich"


def setup_logging(level: str = "WARNING") -> None:
    """Attach a rich stderr handler to the root logger once and set its level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)
