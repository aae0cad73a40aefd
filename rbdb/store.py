# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Store:
    """In-memory key -> value mapping owned by one session.

    Nothing is persisted: the store lives and dies with the session.
    """

    entries: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def put(self, key: str, value: str) -> bool:
        """Set key to value. Returns True if an existing value was replaced."""
        replaced = key in self.entries
        self.entries[key] = value
        return replaced

    def remove(self, key: str) -> Optional[str]:
        return self.entries.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
