from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import AppConfig
from .io_adapter import ConsoleIO
from .session import Session

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive in-memory key-value store (INSERT / SELECT / UPDATE / DELETE).",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML config file.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the log level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--prompt", default=None, help="Override the interactive prompt.")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Defaults < YAML file < RBDB_* environment < command-line flags."""
    cfg = AppConfig.from_file(args.config) if args.config else AppConfig()
    cfg = cfg.with_env()

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.prompt is not None:
        overrides["prompt"] = args.prompt
    return replace(cfg, **overrides) if overrides else cfg


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        cfg = load_config(args)
    except (OSError, ValueError) as e:
        print(f"Application Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=cfg.log_level_value, format=cfg.log_format)
    logger.debug("Resolved config: %s", cfg)

    print(cfg.banner)
    try:
        Session(config=cfg).run(ConsoleIO())
    except Exception:  # noqa: BLE001
        logger.exception("Application Error")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
