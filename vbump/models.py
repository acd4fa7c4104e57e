"""Data models for vbump.

These Pydantic models represent the options and results that flow between
the CLI, the config resolver and the release workflow.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COMMIT_TEMPLATE = "chore(release): {version}"
DEFAULT_MANIFEST = "package.json"
DEFAULT_TAG_PREFIX = "v"


class BumpKind(str, Enum):
    """Which semantic-version tier to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class ReleaseConfig(BaseModel):
    """Effective release settings for one invocation.

    Every field carries its built-in default, so ``ReleaseConfig()`` is the
    bottom layer of the configuration merge.

    Attributes:
        source_branch: Branch that receives the bump commit and tag. None
            means "whatever branch is checked out".
        target_branches: Branches that pull the source branch after the
            bump, in order.
        commit_message_template: Commit message with a ``{version}``
            placeholder.
        manifest_path: Path of the JSON manifest, relative to the working
            directory.
        create_tag: Whether to tag the bump commit.
        tag_prefix: Prepended to the version to form the tag name.
    """

    model_config = ConfigDict(frozen=True)

    source_branch: str | None = None
    target_branches: list[str] = Field(default_factory=list)
    commit_message_template: str = DEFAULT_COMMIT_TEMPLATE
    manifest_path: str = DEFAULT_MANIFEST
    create_tag: bool = True
    tag_prefix: str = DEFAULT_TAG_PREFIX


class ConfigOverrides(BaseModel):
    """A partial ReleaseConfig. ``None`` means the layer does not set the field."""

    source_branch: str | None = None
    target_branches: list[str] | None = None
    commit_message_template: str | None = None
    manifest_path: str | None = None
    create_tag: bool | None = None
    tag_prefix: str | None = None


class BumpOptions(ReleaseConfig):
    """Everything the release workflow needs for a single bump."""

    bump_kind: BumpKind
    dry_run: bool = False
    skip_push: bool = False
    skip_merge: bool = False
    commit_message: str | None = None


class VersionInfo(BaseModel):
    """Result of a completed (or simulated) bump."""

    model_config = ConfigDict(frozen=True)

    old_version: str
    new_version: str


class ReleasePlan(BaseModel):
    """What a bump would do, as reported by a dry run."""

    model_config = ConfigDict(frozen=True)

    current_version: str
    new_version: str
    source_branch: str
    target_branches: list[str]
    tag: str | None
    push: bool
    merge: bool

    def describe(self) -> list[str]:
        targets = ", ".join(self.target_branches) if self.target_branches else "none"
        return [
            f"Current version: {self.current_version}",
            f"New version:     {self.new_version}",
            f"Source branch:   {self.source_branch}",
            f"Target branches: {targets}",
            f"Create tag:      {self.tag or 'no'}",
            f"Push:            {'yes' if self.push else 'no'}",
            f"Merge:           {'yes' if self.merge else 'no'}",
        ]
