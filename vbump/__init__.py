"""vbump - semantic version bumps with a scripted git release workflow."""

from .models import BumpKind, BumpOptions, ReleaseConfig, VersionInfo
from .versions import calculate_new_version
from .workflow import bump

__all__ = [
    "BumpKind",
    "BumpOptions",
    "ReleaseConfig",
    "VersionInfo",
    "bump",
    "calculate_new_version",
]
