# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .command_parser import ParseError, parse, tokenize
from .config import AppConfig
from .executor import CommandExecutor, ExecError, build_registry
from .io_adapter import IOAdapter
from .store import Store

logger = logging.getLogger(__name__)


@dataclass
class LineOutcome:
    message: str
    ok: bool = True
    # True when the line asked to end the session
    stop: bool = False


class Session:
    """One interactive session: a single store and the read/parse/execute loop."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        store: Optional[Store] = None,
        executor: Optional[CommandExecutor] = None,
    ) -> None:
        self.config = config or AppConfig()
        self.store = store if store is not None else Store()
        self.executor = executor or CommandExecutor(
            registry=build_registry(warn_on_overwrite=self.config.warn_on_overwrite)
        )

    def is_quit(self, tokens: list[str]) -> bool:
        return len(tokens) == 1 and tokens[0].lower() in self.config.quit_words

    def handle_line(self, line: str) -> LineOutcome:
        tokens = tokenize(line)
        if self.is_quit(tokens):
            return LineOutcome(message="", stop=True)

        try:
            command = parse(tokens)
        except ParseError as e:
            return LineOutcome(message=f"Query is malformed: {e}", ok=False)

        try:
            result = self.executor.execute(command, self.store)
        except ExecError as e:
            return LineOutcome(message=f"Query processing failed: {e}", ok=False)

        return LineOutcome(message=result)

    def run(self, io: IOAdapter) -> int:
        """Process lines until a quit word or end of input. Returns lines handled."""
        logger.info("Session started")
        handled = 0
        while True:
            line = io.read_line(self.config.prompt)
            if line is None:
                break
            logger.debug("Read line: %r", line)

            outcome = self.handle_line(line)
            if outcome.stop:
                break
            handled += 1
            if outcome.ok:
                io.show(outcome.message)
            else:
                io.show_error(outcome.message)

        logger.info("Session stopped after %d line(s), %d key(s) in store", handled, len(self.store))
        return handled
