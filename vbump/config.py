"""Configuration file loading and option merging.

Settings come from three layers, lowest first: built-in defaults, the
persisted ``vbump.json`` and explicit command-line flags. The merge itself
is a pure function so the layers can be tested independently.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigExists, ConfigLoadFailed
from .models import ConfigOverrides, ReleaseConfig

CONFIG_FILE = "vbump.json"


def parse_targets(value: str) -> list[str]:
    """Split a comma-separated branch list, trimming each entry.

    Empty entries are kept: ``"uat, ,main,"`` → ``["uat", "", "main", ""]``.
    """
    return [part.strip() for part in value.split(",")]


class BranchesConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    source: str | None = None
    targets: list[str] | None = None

    @field_validator("targets", mode="before")
    @classmethod
    def _split_targets(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_targets(value)
        return value


class ConfigFile(BaseModel):
    """On-disk shape of vbump.json.

    Example:
        {
          "branches": {"source": "develop", "targets": ["uat", "main"]},
          "commitMessageTemplate": "chore(release): {version}",
          "packageFile": "package.json",
          "createTag": true,
          "tagPrefix": "v"
        }
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    branches: BranchesConfig | None = None
    commit_message_template: str | None = Field(
        default=None, alias="commitMessageTemplate"
    )
    package_file: str | None = Field(default=None, alias="packageFile")
    create_tag: bool | None = Field(default=None, alias="createTag")
    tag_prefix: str | None = Field(default=None, alias="tagPrefix")

    def to_overrides(self) -> ConfigOverrides:
        branches = self.branches or BranchesConfig()
        return ConfigOverrides(
            source_branch=branches.source,
            target_branches=branches.targets,
            commit_message_template=self.commit_message_template,
            manifest_path=self.package_file,
            create_tag=self.create_tag,
            tag_prefix=self.tag_prefix,
        )

    def dumps(self) -> str:
        data = self.model_dump(by_alias=True, exclude_none=True)
        return json.dumps(data, indent=2) + "\n"


def read_config(path: str | Path) -> ConfigFile:
    """Parse and validate a config file.

    Raises:
        ConfigLoadFailed: If the file cannot be read, is not UTF-8 JSON, or has
            the wrong shape.
    """
    path = Path(path)
    try:
        return ConfigFile.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise ConfigLoadFailed(str(path), str(exc)) from exc


def load_config(path: str | Path = CONFIG_FILE) -> ConfigFile:
    """Load the persisted config, treating a missing or broken file as empty.

    A broken file is reported on stderr and otherwise ignored.
    """
    path = Path(path)
    if not path.exists():
        return ConfigFile()
    try:
        return read_config(path)
    except ConfigLoadFailed as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        return ConfigFile()


def write_config(path: str | Path, config: ConfigFile) -> None:
    """Write a new config file. Never overwrites an existing one."""
    path = Path(path)
    if path.exists():
        raise ConfigExists(str(path))
    path.write_text(config.dumps(), encoding="utf-8")


def resolve_config(
    persisted: ConfigOverrides | None = None,
    overrides: ConfigOverrides | None = None,
    defaults: ReleaseConfig | None = None,
) -> ReleaseConfig:
    """Merge configuration layers field by field.

    Precedence: explicit override, then the persisted file, then the
    built-in default.

    Args:
        persisted: Values read from vbump.json, if any.
        overrides: Values given on the command line, if any.
        defaults: Bottom layer; ``ReleaseConfig()`` when omitted.

    Returns:
        A new ReleaseConfig. None of the inputs are modified.
    """
    merged = (defaults or ReleaseConfig()).model_dump()
    for layer in (persisted, overrides):
        if layer is not None:
            merged.update(layer.model_dump(exclude_none=True))
    return ReleaseConfig(**merged)
