"""Formatted diagnostic messages written to standard output."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

MAX_LENGTH = 1023


class Logger:
    """Writes printf-style formatted lines to a stream (standard output by default)."""

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True) -> None:
        self.stream = stream
        self.enabled = enabled

    def log(self, fmt: str, *args: Any) -> None:
        """Format ``fmt`` with ``args`` using ``%`` rules and write it as one line."""
        if not self.enabled:
            return
        message = fmt % args if args else fmt
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(message[:MAX_LENGTH] + "\n")
        stream.flush()


_logger = Logger()


def log(fmt: str, *args: Any) -> None:
    """Log through the shared engine logger."""
    _logger.log(fmt, *args)