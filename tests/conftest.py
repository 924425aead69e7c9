"""Shared pytest fixtures for the drizzle-setup test suite.

Provides reusable fixtures for:
- Temporary Next.js project directories (valid and invalid)
- A mocked dependency installer
- Scripted confirmation / prompt answers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from drizzle_setup.installer import DependencyInstaller


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of every test."""
    for name in (
        "DATABASE_URL",
        "DRIZZLE_SETUP_PACKAGE_MANAGER",
        "DRIZZLE_SETUP_INSTALL_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Project directories
# ---------------------------------------------------------------------------

def write_manifest(project_dir: Path, manifest: dict[str, Any]) -> Path:
    """Write *manifest* as ``package.json`` inside *project_dir*."""
    path = project_dir / "package.json"
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    """A minimal ``package.json`` produced by create-next-app."""
    return {
        "name": "my-next-app",
        "version": "0.1.0",
        "private": True,
        "scripts": {
            "dev": "next dev",
            "build": "next build",
            "start": "next start",
        },
        "dependencies": {
            "next": "14.0.0",
            "react": "18.2.0",
            "react-dom": "18.2.0",
        },
        "devDependencies": {
            "typescript": "5.3.3",
        },
    }


@pytest.fixture
def next_project(tmp_path: Path, sample_manifest: dict[str, Any]) -> Path:
    """Temporary directory that passes project validation."""
    project_dir = tmp_path / "my-next-app"
    project_dir.mkdir()
    write_manifest(project_dir, sample_manifest)
    (project_dir / "next.config.js").write_text(
        "module.exports = {};\n", encoding="utf-8"
    )
    yield project_dir


@pytest.fixture
def plain_node_project(tmp_path: Path) -> Path:
    """Temporary directory with a ``package.json`` that has no ``next`` dependency."""
    project_dir = tmp_path / "plain-node-app"
    project_dir.mkdir()
    write_manifest(
        project_dir,
        {"name": "plain", "version": "1.0.0", "dependencies": {"express": "4.18.2"}},
    )
    (project_dir / "next.config.js").write_text("module.exports = {};\n", encoding="utf-8")
    yield project_dir


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_installer() -> MagicMock:
    """A DependencyInstaller whose ``install`` never spawns a process."""
    installer = MagicMock(spec=DependencyInstaller)
    installer.install = AsyncMock(return_value=[])
    return installer


@pytest.fixture
def confirm_yes() -> MagicMock:
    return MagicMock(return_value=True)


@pytest.fixture
def confirm_no() -> MagicMock:
    return MagicMock(return_value=False)
