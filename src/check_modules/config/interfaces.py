from __future__ import annotations

from typing import Protocol

from check_modules.config.models import ConfigLoadRequest, ConfigLoadResult


class CheckGroupConfigLoader(Protocol):
    """
    Loads the effective check-group configuration.

    Implementations read the base file, then the local override file, and must report
    per-file failures in the result instead of raising.
    """

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> ConfigLoadResult:
        ...
