"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def manifest(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a package.json in a temporary working directory."""
    content = {
        "name": "test-package",
        "version": "1.2.3",
        "description": "Fixture package",
        "scripts": {"build": "tsc"},
        "dependencies": {"left-pad": "^1.3.0"},
    }
    path = tmp_path / "package.json"
    path.write_text(json.dumps(content, indent=2) + "\n")
    monkeypatch.chdir(tmp_path)
    return path
