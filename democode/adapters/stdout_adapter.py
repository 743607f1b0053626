"""Stdout logging adapter."""

import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from ..interfaces import ILogSink

# Sortable universal format: 2024-01-31 18:04:05Z
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%SZ"


class StdoutAdapter(ILogSink):
    """Adapter for stdout logging."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def _timestamp(self) -> str:
        return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)

    def log(self, message: str) -> None:
        """Write log entry to stdout."""
        stream = self._stream or sys.stdout
        try:
            print(f"{self._timestamp()}: {message}", file=stream)
        except (OSError, ValueError) as e:
            # closed or broken stream
            print(f"ERROR: log write failed: {e}", file=sys.stderr)
