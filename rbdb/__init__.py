"""RBDB: an interactive in-memory key-value store with a tiny query language."""

from rbdb.command_parser import (
    ArityMismatchError,
    Command,
    CommandKind,
    EmptyKeyError,
    EmptyQueryError,
    ParseError,
    UnknownCommandError,
    parse,
    tokenize,
)
from rbdb.executor import CommandExecutor, ExecError, NotFoundError, execute
from rbdb.store import Store

__version__ = "0.1.0"

__all__ = [
    "ArityMismatchError",
    "Command",
    "CommandExecutor",
    "CommandKind",
    "EmptyKeyError",
    "EmptyQueryError",
    "ExecError",
    "NotFoundError",
    "ParseError",
    "Store",
    "UnknownCommandError",
    "execute",
    "parse",
    "tokenize",
]
