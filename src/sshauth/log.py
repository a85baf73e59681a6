"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_logger = logging.getLogger("sshauth")


def setup_logging(verbose: bool = False) -> None:
    """Configure the sshauth logger.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    _logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not _logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        _logger.addHandler(handler)
