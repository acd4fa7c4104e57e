"""Exceptions raised by vbump.

Every error the CLI knows how to report derives from VbumpError, so the
command layer can turn it into a single "Error: ..." line and a non-zero
exit status.
"""

from __future__ import annotations


class VbumpError(Exception):
    """Base class for all vbump errors."""


class InvalidVersionFormat(VbumpError):
    def __init__(self, version: str) -> None:
        super().__init__(
            f"Invalid version format: {version!r}. "
            "Expected semantic version (e.g., 1.2.3)"
        )
        self.version = version


class ManifestNotFound(VbumpError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Package file not found: {path}")
        self.path = path


class InvalidManifest(VbumpError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Package file is not valid JSON: {path} ({reason})")
        self.path = path


class ManifestAccessFailed(VbumpError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot access package file: {path} ({reason})")
        self.path = path


class MissingVersionField(VbumpError):
    def __init__(self, path: str) -> None:
        super().__init__(f"No version field found in {path}")
        self.path = path


class NotARepository(VbumpError):
    def __init__(self) -> None:
        super().__init__("Not a git repository")


class NoSourceBranch(VbumpError):
    def __init__(self) -> None:
        super().__init__(
            "No source branch configured and HEAD is detached. "
            "Pass --source or set branches.source in the config file."
        )


class RepositoryCommandFailed(VbumpError):
    """A git invocation exited non-zero or git could not be started.

    Attributes:
        command: The full argument vector that was attempted, ``git`` included.
        message: What git (or the OS) reported.
    """

    def __init__(self, command: list[str], message: str) -> None:
        super().__init__(f"Git command failed: {' '.join(command)}\n{message}")
        self.command = command
        self.message = message


class MissingBumpKind(VbumpError):
    def __init__(self) -> None:
        super().__init__(
            "Please specify exactly one bump type: --major, --minor, or --patch"
        )


class ConfigLoadFailed(VbumpError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load config file {path}: {reason}")
        self.path = path


class ConfigExists(VbumpError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f"Configuration file already exists: {path}\n"
            "Delete the existing file if you want to reinitialize."
        )
        self.path = path
