"""Git utilities.

Provides a thin wrapper around subprocess for running git, a couple of
read-only repository queries, and output formatting helpers.
"""

from __future__ import annotations

import subprocess

from .errors import RepositoryCommandFailed


def git(*args: str) -> str:
    """Run a git command and return stdout.

    Each call runs exactly once; there are no retries and no timeout.

    Args:
        *args: Arguments to pass to git (e.g., "switch", "develop").

    Returns:
        Stripped stdout from the git command.

    Raises:
        RepositoryCommandFailed: If git exits non-zero or cannot be started.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        message = (exc.stderr or exc.stdout or "").strip() or str(exc)
        raise RepositoryCommandFailed(cmd, message) from exc
    except OSError as exc:
        raise RepositoryCommandFailed(cmd, str(exc)) from exc
    return result.stdout.strip()


def is_repository() -> bool:
    """Return True if the working directory is inside a git repository."""
    try:
        git("rev-parse", "--git-dir")
    except RepositoryCommandFailed:
        return False
    return True


def current_branch() -> str:
    """Return the name of the checked-out branch (empty on a detached HEAD)."""
    return git("branch", "--show-current")


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a release in terminal output.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")
