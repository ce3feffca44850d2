from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, Sequence

from dotenv import dotenv_values

from check_modules.config.models import (
    BASE_CONFIG_FILENAME,
    CONFIG_DIR_PARTS,
    DEFAULT_CHECK_GROUP_CONFIG,
    LOCAL_CONFIG_FILENAME,
    Candidate,
    CheckGroupConfig,
    ConfigError,
    ConfigLoadRequest,
    ConfigLoadResult,
    ConfigSource,
    PartialCheckGroupConfig,
)
from check_modules.core.errors import error_code, normalize_error

logger = logging.getLogger(__name__)

# (section, key) pairs accepted from a config file, using the on-disk names.
RECOGNIZED_FIELDS: Sequence[tuple[str, str]] = (
    ("groups", "fast"),
    ("groups", "deep"),
    ("integrations", "npmCheckUpdates"),
    ("integrations", "npmDeprecatedCheck"),
    ("integrations", "eslint"),
    ("integrations", "ghSlimify"),
)


def _deep_merge_dicts(base: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            _deep_merge_dicts(base[k], v)  # type: ignore[index]
            continue
        base[k] = v


def _read_dotenv_if_present(dotenv_path: Path) -> dict[str, str]:
    if not dotenv_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}


def resolve_root(request: ConfigLoadRequest, dotenv: Optional[Mapping[str, str]] = None) -> Path:
    override_root = os.environ.get(request.env_var) or (dotenv or {}).get(request.env_var)
    if override_root:
        return Path(override_root).resolve()
    if request.project_root:
        return Path(request.project_root).resolve()
    return Path.cwd()


def config_candidates(root: Path) -> list[Candidate]:
    """Return the candidate files for `root`, base file first."""
    config_dir = root.joinpath(*CONFIG_DIR_PARTS)
    return [
        Candidate(path=str(config_dir / BASE_CONFIG_FILENAME), kind="default"),
        Candidate(path=str(config_dir / LOCAL_CONFIG_FILENAME), kind="local"),
    ]


def normalize_partial(raw: Any) -> PartialCheckGroupConfig:
    """
    Pick the recognized boolean flags out of a decoded JSON value.

    Anything else is dropped silently: unknown keys, wrong types, non-object sections,
    or a top-level value that is not an object at all.
    """
    normalized: dict[str, dict[str, bool]] = {"groups": {}, "integrations": {}}
    if not isinstance(raw, Mapping):
        return PartialCheckGroupConfig.model_validate(normalized)

    for section, key in RECOGNIZED_FIELDS:
        raw_section = raw.get(section)
        if not isinstance(raw_section, Mapping):
            continue
        value = raw_section.get(key)
        if isinstance(value, bool):
            normalized[section][key] = value
    return PartialCheckGroupConfig.model_validate(normalized)


def apply_partial_config(
    target: MutableMapping[str, Any],
    partial: PartialCheckGroupConfig,
) -> MutableMapping[str, Any]:
    _deep_merge_dicts(target, partial.defined_fields())
    return target


def _read_partial(path: Path) -> PartialCheckGroupConfig:
    raw = path.read_text(encoding="utf-8")
    return normalize_partial(json.loads(raw))


class JsonCheckGroupConfigLoader:
    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> ConfigLoadResult:
        dotenv: dict[str, str] = {}
        if request.dotenv_path is not None:
            dotenv = _read_dotenv_if_present(Path(request.dotenv_path))

        root = resolve_root(request, dotenv)
        working: dict[str, Any] = copy.deepcopy(DEFAULT_CHECK_GROUP_CONFIG.model_dump(by_alias=True))
        sources: list[ConfigSource] = []
        errors: list[ConfigError] = []

        for candidate in config_candidates(root):
            try:
                partial = _read_partial(Path(candidate.path))
                apply_partial_config(working, partial)
            except Exception as exc:
                if error_code(exc) == "ENOENT":
                    logger.debug("Config source missing. kind=%s path=%s", candidate.kind, candidate.path)
                    sources.append(ConfigSource(path=candidate.path, kind=candidate.kind, applied=False, missing=True))
                    continue
                logger.warning(
                    "Config source could not be applied. kind=%s path=%s error=%s",
                    candidate.kind,
                    candidate.path,
                    exc,
                )
                sources.append(ConfigSource(path=candidate.path, kind=candidate.kind, applied=False))
                errors.append(ConfigError(path=candidate.path, kind=candidate.kind, error=normalize_error(exc)))
                continue

            logger.debug("Config source applied. kind=%s path=%s", candidate.kind, candidate.path)
            sources.append(ConfigSource(path=candidate.path, kind=candidate.kind, applied=True))

        return ConfigLoadResult(
            config=CheckGroupConfig.model_validate(working),
            sources=tuple(sources),
            errors=tuple(errors),
        )


async def load_check_group_config(
    *,
    project_root: Optional[str] = None,
    dotenv_path: Optional[str] = None,
) -> ConfigLoadResult:
    """Load the check-group configuration rooted at `project_root` (see ConfigLoadRequest)."""
    request = ConfigLoadRequest(project_root=project_root, dotenv_path=dotenv_path)
    return await JsonCheckGroupConfigLoader().load(request)
