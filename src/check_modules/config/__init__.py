"""Layered check-group configuration (base file + local override)."""

from check_modules.config.interfaces import CheckGroupConfigLoader
from check_modules.config.loader import JsonCheckGroupConfigLoader, load_check_group_config
from check_modules.config.models import (
    DEFAULT_CHECK_GROUP_CONFIG,
    CheckGroupConfig,
    ConfigError,
    ConfigLoadRequest,
    ConfigLoadResult,
    ConfigSource,
    PartialCheckGroupConfig,
)

__all__ = [
    "DEFAULT_CHECK_GROUP_CONFIG",
    "CheckGroupConfig",
    "CheckGroupConfigLoader",
    "ConfigError",
    "ConfigLoadRequest",
    "ConfigLoadResult",
    "ConfigSource",
    "JsonCheckGroupConfigLoader",
    "PartialCheckGroupConfig",
    "load_check_group_config",
]
