"""
people_explorer.console.io - Terminal wrapper
==============================================
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


class ConsoleIO:
    """
    Minimal terminal abstraction used by every handler.

    Swap in a fake with the same methods to drive the UI from tests.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str = "") -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_line(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def read_line(self) -> Optional[str]:
        """Read one line without its newline; None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def read_key(self) -> None:
        # line-buffered terminals deliver the key with Enter
        self.read_line()

    def clear(self) -> None:
        if self.stdout.isatty():
            os.system("cls" if os.name == "nt" else "clear")
