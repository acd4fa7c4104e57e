"""Tests for vbump.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vbump.models import BumpKind, BumpOptions, ReleaseConfig, VersionInfo


class TestReleaseConfig:
    """Tests for ReleaseConfig."""

    def test_defaults(self) -> None:
        """An empty ReleaseConfig carries the built-in defaults."""
        config = ReleaseConfig()
        assert config.source_branch is None
        assert config.target_branches == []
        assert config.manifest_path == "package.json"
        assert config.create_tag is True
        assert config.tag_prefix == "v"

    def test_is_frozen(self) -> None:
        """Fields cannot be reassigned after construction."""
        config = ReleaseConfig()
        with pytest.raises(ValidationError):
            config.tag_prefix = "r"


class TestBumpOptions:
    """Tests for BumpOptions."""

    def test_bump_kind_from_string(self) -> None:
        """A plain string is coerced into a BumpKind."""
        options = BumpOptions(bump_kind="patch")
        assert options.bump_kind is BumpKind.PATCH
        assert options.skip_push is False
        assert options.commit_message is None

    def test_unknown_bump_kind(self) -> None:
        """Unknown bump kinds fail validation."""
        with pytest.raises(ValidationError):
            BumpOptions(bump_kind="micro")


class TestVersionInfo:
    """Tests for VersionInfo."""

    def test_create(self) -> None:
        """Both versions are stored as given."""
        info = VersionInfo(old_version="1.0.0", new_version="1.0.1")
        assert info.old_version == "1.0.0"
        assert info.new_version == "1.0.1"
