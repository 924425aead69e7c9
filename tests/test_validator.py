"""Unit tests for Next.js project detection (drizzle_setup.validator)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from drizzle_setup.validator import (
    FRAMEWORK_CONFIG_FILES,
    has_framework_config,
    has_framework_dependency,
    is_valid_target,
)

pytestmark = pytest.mark.unit


def _project(tmp_path: Path, manifest: dict | str | None, config_file: str | None) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    if manifest is not None:
        text = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (project_dir / "package.json").write_text(text, encoding="utf-8")
    if config_file is not None:
        (project_dir / config_file).write_text("export default {};\n", encoding="utf-8")
    return project_dir


class TestIsValidTarget:
    def test_valid_project(self, next_project):
        assert is_valid_target(next_project) is True

    def test_accepts_str_path(self, next_project):
        assert is_valid_target(str(next_project)) is True

    def test_missing_manifest(self, tmp_path):
        project_dir = _project(tmp_path, None, "next.config.js")
        assert is_valid_target(project_dir) is False

    def test_missing_directory(self, tmp_path):
        assert is_valid_target(tmp_path / "does-not-exist") is False

    def test_unparsable_manifest(self, tmp_path):
        project_dir = _project(tmp_path, "{ not json", "next.config.js")
        assert is_valid_target(project_dir) is False

    def test_manifest_not_an_object(self, tmp_path):
        project_dir = _project(tmp_path, "[]", "next.config.js")
        assert is_valid_target(project_dir) is False

    def test_deeply_nested_manifest(self, tmp_path):
        project_dir = _project(tmp_path, "[" * 200000 + "]" * 200000, "next.config.js")
        assert is_valid_target(project_dir) is False

    def test_manifest_is_a_directory(self, tmp_path):
        project_dir = tmp_path / "project"
        (project_dir / "package.json").mkdir(parents=True)
        (project_dir / "next.config.js").write_text("", encoding="utf-8")
        assert is_valid_target(project_dir) is False

    def test_missing_dependency_with_config_file(self, plain_node_project):
        assert is_valid_target(plain_node_project) is False

    def test_dependency_without_config_file(self, tmp_path):
        project_dir = _project(tmp_path, {"dependencies": {"next": "14.0.0"}}, None)
        assert is_valid_target(project_dir) is False

    def test_unrecognised_config_name(self, tmp_path):
        project_dir = _project(
            tmp_path, {"dependencies": {"next": "14.0.0"}}, "next.config.cjs"
        )
        assert is_valid_target(project_dir) is False

    @pytest.mark.parametrize("config_file", FRAMEWORK_CONFIG_FILES)
    def test_each_config_name(self, tmp_path, config_file):
        project_dir = _project(tmp_path, {"dependencies": {"next": "14.0.0"}}, config_file)
        assert is_valid_target(project_dir) is True

    def test_dev_dependency_counts(self, tmp_path):
        project_dir = _project(
            tmp_path, {"devDependencies": {"next": "^14"}}, "next.config.mjs"
        )
        assert is_valid_target(project_dir) is True

    def test_unrelated_fields_do_not_matter(self, tmp_path):
        manifest = {
            "name": 42,
            "scripts": None,
            "workspaces": ["packages/*"],
            "dependencies": {"next": "14.0.0"},
            "engines": {"node": ">=18"},
        }
        project_dir = _project(tmp_path, manifest, "next.config.ts")
        assert is_valid_target(project_dir) is True


class TestHelpers:
    def test_has_framework_dependency(self):
        assert has_framework_dependency({"dependencies": {"next": "14"}})
        assert has_framework_dependency({"devDependencies": {"next": "14"}})

    def test_has_framework_dependency_missing(self):
        assert not has_framework_dependency({})
        assert not has_framework_dependency({"dependencies": {"react": "18"}})
        assert not has_framework_dependency({"dependencies": ["next"]})

    def test_has_framework_dependency_empty_version(self):
        assert not has_framework_dependency({"dependencies": {"next": ""}})

    def test_has_framework_config(self, next_project, tmp_path):
        assert has_framework_config(next_project)
        assert not has_framework_config(tmp_path)
