# -*- coding: utf-8 -*-

from __future__ import annotations

from ..command_parser import Command, CommandKind
from ..store import Store


class ExecError(LookupError):
    pass


class NotFoundError(ExecError):
    def __init__(self, key: str) -> None:
        super().__init__(f"No entry found for key = {key}")
        self.key = key


class CommandHandler:
    kind: CommandKind

    def run(self, store: Store, command: Command) -> str:
        raise NotImplementedError
