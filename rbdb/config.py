# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import List

import yaml


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    # Interactive loop
    prompt: str = "RBDB -> "
    banner: str = "Database has started..."
    quit_words: List[str] = None

    # INSERT over an existing key is allowed; this only controls the warning
    warn_on_overwrite: bool = True

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def __post_init__(self) -> None:
        if self.quit_words is None:
            self.quit_words = ["quit", "exit"]
        self.quit_words = [str(w).lower() for w in self.quit_words]
        self.log_level = str(self.log_level).upper().strip()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}', expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_file(cls, path: Path) -> "AppConfig":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        if "warn_on_overwrite" in data:
            data["warn_on_overwrite"] = _as_bool(data["warn_on_overwrite"], "warn_on_overwrite")
        if "quit_words" in data and not isinstance(data["quit_words"], list):
            raise ValueError(f"'quit_words' must be a list in {path}")

        return cls(**data)

    def with_env(self) -> "AppConfig":
        """Return a copy with RBDB_* environment variables applied on top."""
        overrides = {}
        if os.getenv("RBDB_PROMPT") is not None:
            overrides["prompt"] = os.environ["RBDB_PROMPT"]
        if os.getenv("RBDB_BANNER") is not None:
            overrides["banner"] = os.environ["RBDB_BANNER"]
        if os.getenv("RBDB_LOG_LEVEL"):
            overrides["log_level"] = os.environ["RBDB_LOG_LEVEL"]
        if os.getenv("RBDB_WARN_ON_OVERWRITE"):
            overrides["warn_on_overwrite"] = _as_bool(
                os.environ["RBDB_WARN_ON_OVERWRITE"], "RBDB_WARN_ON_OVERWRITE"
            )
        if not overrides:
            return self
        return replace(self, **overrides)


def _as_bool(raw: object, name: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
