# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class CommandKind(str, Enum):
    INSERT = "insert"
    SELECT = "select"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def arity(self) -> int:
        """Total token count, command name included."""
        return 3 if self.takes_value else 2

    @property
    def takes_value(self) -> bool:
        return self in (CommandKind.INSERT, CommandKind.UPDATE)

    @classmethod
    def lookup(cls, token: str) -> Optional["CommandKind"]:
        try:
            return cls(token.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    key: str
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError(f"{self.kind.name}: key must not be empty")
        if self.kind.takes_value and self.value is None:
            raise ValueError(f"{self.kind.name} requires a value, but none was provided")
        if not self.kind.takes_value and self.value is not None:
            raise ValueError(f"{self.kind.name} does not take a value")


class ParseError(ValueError):
    pass


class EmptyQueryError(ParseError):
    def __init__(self) -> None:
        super().__init__("Empty query")


class UnknownCommandError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid query type: {token}")
        self.token = token


class ArityMismatchError(ParseError):
    """Wrong token count for the resolved command.

    Raised for both too few and too many tokens; only the message differs.
    """

    def __init__(self, kind: CommandKind, expected: int, got: int) -> None:
        reason = "Not enough arguments" if got < expected else "Too many arguments"
        super().__init__(
            f"{reason}: {kind.name} expects {expected} tokens, got {got}"
        )
        self.kind = kind
        self.expected = expected
        self.got = got


class EmptyKeyError(ParseError):
    def __init__(self, kind: CommandKind) -> None:
        super().__init__(f"Empty key: {kind.name} requires a non-empty key")
        self.kind = kind


def tokenize(line: str) -> List[str]:
    return (line or "").split()


def parse(tokens: Sequence[str]) -> Command:
    """Build a validated Command from pre-split tokens.

    Raises a ParseError subclass when the tokens do not form a command.
    """
    if not tokens:
        raise EmptyQueryError()

    kind = CommandKind.lookup(tokens[0])
    if kind is None:
        raise UnknownCommandError(tokens[0])

    if len(tokens) != kind.arity:
        raise ArityMismatchError(kind, kind.arity, len(tokens))

    if not tokens[1]:
        raise EmptyKeyError(kind)

    value = tokens[2] if kind.takes_value else None
    command = Command(kind=kind, key=tokens[1], value=value)
    logger.debug("Parsed %s key=%s", kind.name, command.key)
    return command
