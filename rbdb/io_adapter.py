# -*- coding: utf-8 -*-

from __future__ import annotations

import sys
from typing import Optional


class IOAdapter:
    """Input/output seam so the session can run against a console or a test double."""

    def read_line(self, prompt: str) -> Optional[str]:
        """Return the next line, or None when input is exhausted."""
        raise NotImplementedError

    def show(self, text: str) -> None:
        raise NotImplementedError

    def show_error(self, text: str) -> None:
        raise NotImplementedError


class ConsoleIO(IOAdapter):
    def read_line(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            return None

    def show(self, text: str) -> None:
        print(text)

    def show_error(self, text: str) -> None:
        print(text, file=sys.stderr)
