from __future__ import annotations

import asyncio
import logging

from check_modules.config import load_check_group_config
from check_modules.config.models import LoggingSettings
from check_modules.logging import init_logging


async def main() -> None:
    init_logging(LoggingSettings(level="DEBUG"))
    result = await load_check_group_config(project_root="examples", dotenv_path=".env")

    logger = logging.getLogger("smoke")
    logger.info("Groups fast=%s deep=%s", result.config.groups.fast, result.config.groups.deep)
    logger.info("Applied sources=%s", [source.kind for source in result.applied_sources])
    for error in result.errors:
        logger.warning("Config error kind=%s path=%s error=%s", error.kind, error.path, error.error)


if __name__ == "__main__":
    asyncio.run(main())
