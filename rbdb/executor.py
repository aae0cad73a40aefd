# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from .command_parser import Command, CommandKind
from .commands.base import CommandHandler, ExecError, NotFoundError
from .commands.builtins import DeleteCommand, InsertCommand, SelectCommand, UpdateCommand
from .store import Store

logger = logging.getLogger(__name__)

__all__ = [
    "CommandExecutor",
    "CommandRegistry",
    "ExecError",
    "NotFoundError",
    "build_registry",
    "execute",
]


@dataclass
class CommandRegistry:
    commands: Dict[CommandKind, CommandHandler]

    def __post_init__(self) -> None:
        missing = [k.name for k in CommandKind if k not in self.commands]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")

    def get(self, kind: CommandKind) -> CommandHandler:
        return self.commands[kind]


def build_registry(warn_on_overwrite: bool = True) -> CommandRegistry:
    handlers = [
        InsertCommand(warn_on_overwrite=warn_on_overwrite),
        SelectCommand(),
        UpdateCommand(),
        DeleteCommand(),
    ]
    return CommandRegistry(commands={h.kind: h for h in handlers})


@dataclass
class CommandExecutor:
    registry: CommandRegistry

    def execute(self, command: Command, store: Store) -> str:
        """Apply command to store and return the text for the user.

        Raises ExecError when UPDATE/DELETE target a missing key; the store
        is left untouched in that case.
        """
        handler = self.registry.get(command.kind)
        result = handler.run(store, command)
        logger.debug("Executed %s key=%s", command.kind.name, command.key)
        return result


_default_executor = CommandExecutor(registry=build_registry())


def execute(command: Command, store: Store) -> str:
    return _default_executor.execute(command, store)
