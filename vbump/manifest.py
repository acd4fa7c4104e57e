"""Reading and writing the version field of a JSON manifest.

The manifest (usually package.json) belongs to the host project: the whole
document is read, only the top-level ``version`` is replaced and the whole
document is written back with 2-space indentation and a trailing newline.
Writes are not atomic; a crash mid-write can leave a truncated file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import (
    InvalidManifest,
    ManifestAccessFailed,
    ManifestNotFound,
    MissingVersionField,
)


def _load(path: Path) -> Any:
    if not path.is_file():
        raise ManifestNotFound(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidManifest(str(path), f"not UTF-8: {exc}") from exc
    except OSError as exc:
        raise ManifestAccessFailed(str(path), str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidManifest(str(path), str(exc)) from exc


def get_current_version(path: str | Path) -> str:
    """Return the raw ``version`` string stored in the manifest."""
    path = Path(path)
    doc = _load(path)
    if not isinstance(doc, dict) or not doc.get("version"):
        raise MissingVersionField(str(path))
    return str(doc["version"])


def update_version(path: str | Path, new_version: str) -> None:
    """Replace the manifest's version, preserving every other field.

    The file is re-read right before writing so edits made since the
    version was first read are not lost.
    """
    path = Path(path)
    doc = _load(path)
    if not isinstance(doc, dict):
        raise MissingVersionField(str(path))
    doc["version"] = str(new_version)
    try:
        path.write_text(
            json.dumps(doc, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise ManifestAccessFailed(str(path), str(exc)) from exc
