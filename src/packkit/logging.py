from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console()
# Diagnostics go to stderr so build output on stdout stays clean
_err_console = Console(stderr=True)

def get_logger(name: str = "packkit") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = RichHandler(console=_err_console, show_time=True, show_level=True, show_path=False)
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

def console() -> Console:
    return _console

def err_console() -> Console:
    return _err_console
