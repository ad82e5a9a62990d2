"""Display device that writes to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from remote_stats.host.base import DisplayDevice


class ConsoleDisplay(DisplayDevice):
    """Prints each update as ``"<label> <text>"`` on its own line."""

    def __init__(self, label: str = "", stream: Optional[TextIO] = None) -> None:
        self._label = label
        self._stream = stream if stream is not None else sys.stdout
        self.text = ""

    def display(self, text: str) -> None:
        self.text = text
        prefix = f"{self._label} " if self._label else ""
        print(f"{prefix}{text}", file=self._stream)
