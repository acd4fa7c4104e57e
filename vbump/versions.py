"""Version parsing and bumping utilities.

Only plain ``MAJOR.MINOR.PATCH`` strings are accepted. Unlike semver's own
parser, incomplete versions are rejected rather than padded, and
prerelease/build metadata is not supported.
"""

from __future__ import annotations

import re

import semver

from .errors import InvalidVersionFormat
from .models import BumpKind

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Examples:
        "1.2.3" → Version(1, 2, 3)
        "1.2"   → InvalidVersionFormat
        "1.a.3" → InvalidVersionFormat
    """
    m = _VERSION_RE.fullmatch(version_str)
    if m is None:
        raise InvalidVersionFormat(version_str)
    major, minor, patch = (int(g) for g in m.groups())
    return semver.Version(major, minor, patch)


def calculate_new_version(current: str, kind: BumpKind | str) -> semver.Version:
    """Return the version that follows ``current`` for the given bump kind.

    Lower tiers reset to zero; nothing carries over between tiers.

    Examples:
        ("1.2.3", "major") → 2.0.0
        ("1.2.3", "minor") → 1.3.0
        ("1.2.3", "patch") → 1.2.4
    """
    version = parse_version(current)
    kind = BumpKind(kind)
    if kind is BumpKind.MAJOR:
        return version.bump_major()
    if kind is BumpKind.MINOR:
        return version.bump_minor()
    return version.bump_patch()
