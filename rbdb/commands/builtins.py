# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

from .base import CommandHandler, NotFoundError
from ..command_parser import Command, CommandKind
from ..store import Store

logger = logging.getLogger(__name__)


class InsertCommand(CommandHandler):
    kind = CommandKind.INSERT

    def __init__(self, warn_on_overwrite: bool = True) -> None:
        self.warn_on_overwrite = warn_on_overwrite

    def run(self, store: Store, command: Command) -> str:
        # upsert: an existing key is overwritten, never rejected
        replaced = store.put(command.key, command.value)
        if replaced and self.warn_on_overwrite:
            logger.warning("Key %s already exists; overwriting. Use UPDATE instead", command.key)
        return f"SUCCESS: Inserted {command.key}:{command.value} into database"


class SelectCommand(CommandHandler):
    kind = CommandKind.SELECT

    def run(self, store: Store, command: Command) -> str:
        value = store.get(command.key)
        if value is None:
            return f"No entry found for key = {command.key}"
        return value


class UpdateCommand(CommandHandler):
    kind = CommandKind.UPDATE

    def run(self, store: Store, command: Command) -> str:
        if command.key not in store:
            raise NotFoundError(command.key)
        store.put(command.key, command.value)
        return f"SUCCESS: Updated {command.key} with {command.value}"


class DeleteCommand(CommandHandler):
    kind = CommandKind.DELETE

    def run(self, store: Store, command: Command) -> str:
        if command.key not in store:
            raise NotFoundError(command.key)
        store.remove(command.key)
        return f"SUCCESS: Deleted {command.key}"
