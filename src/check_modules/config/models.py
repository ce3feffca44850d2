from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

CandidateKind = Literal["default", "local"]

CONFIG_ROOT_ENV_VAR = "CHECK_MODULES_CONFIG_ROOT"
CONFIG_DIR_PARTS = ("scripts", "check-modules")
BASE_CONFIG_FILENAME = "check-groups.config.json"
LOCAL_CONFIG_FILENAME = "check-groups.config.local.json"


class GroupSettings(BaseModel):
    """Which check phases are enabled."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fast: bool = True
    deep: bool = True


class IntegrationSettings(BaseModel):
    """Which optional integrations run."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    npm_check_updates: bool = Field(default=True, alias="npmCheckUpdates")
    npm_deprecated_check: bool = Field(default=True, alias="npmDeprecatedCheck")
    eslint: bool = True
    gh_slimify: bool = Field(default=True, alias="ghSlimify")


class CheckGroupConfig(BaseModel):
    """
    Fully resolved check-group configuration.

    Every flag is always present. Instances are frozen; assigning to a field raises
    pydantic.ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    groups: GroupSettings = Field(default_factory=GroupSettings)
    integrations: IntegrationSettings = Field(default_factory=IntegrationSettings)

    def to_json_dict(self) -> dict[str, Any]:
        """Return the on-disk (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)


class PartialGroupSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    fast: Optional[bool] = None
    deep: Optional[bool] = None


class PartialIntegrationSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    npm_check_updates: Optional[bool] = Field(default=None, alias="npmCheckUpdates")
    npm_deprecated_check: Optional[bool] = Field(default=None, alias="npmDeprecatedCheck")
    eslint: Optional[bool] = None
    gh_slimify: Optional[bool] = Field(default=None, alias="ghSlimify")


class PartialCheckGroupConfig(BaseModel):
    """What a single configuration file contributed. Unset fields are None."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    groups: PartialGroupSettings = Field(default_factory=PartialGroupSettings)
    integrations: PartialIntegrationSettings = Field(default_factory=PartialIntegrationSettings)

    def defined_fields(self) -> dict[str, dict[str, bool]]:
        """Return only the fields this source set, keyed by their on-disk names."""
        return self.model_dump(by_alias=True, exclude_none=True)


DEFAULT_CHECK_GROUP_CONFIG = CheckGroupConfig()


@dataclass(frozen=True, slots=True)
class Candidate:
    path: str
    kind: CandidateKind


@dataclass(frozen=True, slots=True)
class ConfigSource:
    path: str
    kind: CandidateKind
    applied: bool
    missing: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class ConfigError:
    path: str
    kind: CandidateKind
    error: Exception


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    config: CheckGroupConfig
    sources: Sequence[ConfigSource]
    errors: Sequence[ConfigError]

    @property
    def applied_sources(self) -> Sequence[ConfigSource]:
        return tuple(source for source in self.sources if source.applied)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Optional inputs for a check-group configuration loader.

    The environment variable named by `env_var` takes precedence over `project_root`;
    the current working directory is the final fallback. A `.env` file at `dotenv_path`
    can supply that variable for this call only; it is never written into os.environ, and
    a value already in the real environment wins.
    """

    project_root: Optional[str] = None
    env_var: str = CONFIG_ROOT_ENV_VAR
    dotenv_path: Optional[str] = None


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Optional[str] = None
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: FileLoggingSettings = Field(default_factory=FileLoggingSettings)
