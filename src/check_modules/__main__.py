from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from check_modules.config import (
    DEFAULT_CHECK_GROUP_CONFIG,
    CheckGroupConfigLoader,
    ConfigLoadRequest,
    ConfigLoadResult,
    JsonCheckGroupConfigLoader,
)
from check_modules.config.loader import config_candidates, resolve_root
from check_modules.config.models import LoggingSettings
from check_modules.logging import init_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="check-modules-config", description="Check-modules configuration tools")
    parser.add_argument(
        "--project-root",
        default=None,
        help="Project root (default: $CHECK_MODULES_CONFIG_ROOT, then the current directory)",
    )
    parser.add_argument(
        "--dotenv",
        default=".env",
        help="Path to a .env file read before resolving the root (default: .env)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: show
    show_parser = subparsers.add_parser("show", help="Print the effective configuration and its sources")
    show_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any configuration file could not be applied.",
    )

    # Command: init
    init_parser = subparsers.add_parser("init", help="Write the default base configuration file")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing base file.")

    return parser


def _result_payload(result: ConfigLoadResult) -> dict[str, Any]:
    return {
        "config": result.config.to_json_dict(),
        "sources": [
            {
                "path": source.path,
                "kind": source.kind,
                "applied": source.applied,
                **({"missing": source.missing} if source.missing is not None else {}),
            }
            for source in result.sources
        ],
        "errors": [
            {"path": error.path, "kind": error.kind, "error": str(error.error)}
            for error in result.errors
        ],
    }


async def _show(args: argparse.Namespace) -> int:
    request = ConfigLoadRequest(project_root=args.project_root, dotenv_path=args.dotenv)
    loader: CheckGroupConfigLoader = JsonCheckGroupConfigLoader()
    result = await loader.load(request)
    print(json.dumps(_result_payload(result), indent=2))
    if args.strict and result.errors:
        return 1
    return 0


def _init(args: argparse.Namespace) -> int:
    request = ConfigLoadRequest(project_root=args.project_root)
    base = Path(config_candidates(resolve_root(request))[0].path)
    if base.exists() and not args.force:
        logger.error("Base configuration already exists. path=%s", base)
        return 1

    base.parent.mkdir(parents=True, exist_ok=True)
    base.write_text(json.dumps(DEFAULT_CHECK_GROUP_CONFIG.to_json_dict(), indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote base configuration. path=%s", base)
    print(base)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    init_logging(LoggingSettings(level=args.log_level))

    try:
        if args.command == "show":
            return asyncio.run(_show(args))
        if args.command == "init":
            return _init(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
    return 2


if __name__ == "__main__":
    sys.exit(main())
