"""Tests for the filesystem project creator (infra/project_creator.py).

All writes go to pytest's ``tmp_path``.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from playground_wizard.core.models import Component, Playground, ValidatedPlayground, make_validated
from playground_wizard.exceptions import CreationFailedError
from playground_wizard.infra.project_creator import (
    MANIFEST_NAME,
    README_NAME,
    FilesystemProjectCreator,
)


def _validated(**overrides: object) -> ValidatedPlayground:
    defaults: dict[str, object] = {
        "project_name": "Foo",
        "team_name": "Bar",
        "chosen_components": {Component.WEB, Component.CLI},
    }
    defaults.update(overrides)
    return make_validated(Playground(**defaults))  # type: ignore[arg-type]


class TestBuilders:
    def test_manifest(self) -> None:
        assert FilesystemProjectCreator.build_manifest(_validated()) == {
            "name": "Foo",
            "team": "Bar",
            "components": ["CLI", "Web"],
        }

    def test_readme_lists_components(self) -> None:
        readme = FilesystemProjectCreator.build_readme(_validated())
        assert readme.startswith("# Foo\n")
        assert "**Bar**" in readme
        assert "- CLI\n- Web\n" in readme


class TestCreateProject:
    def test_writes_project_directory(self, tmp_path: Path) -> None:
        FilesystemProjectCreator(tmp_path).create_project(_validated())
        project = tmp_path / "Foo"
        manifest = json.loads((project / MANIFEST_NAME).read_text(encoding="utf-8"))
        assert manifest["components"] == ["CLI", "Web"]
        assert (project / README_NAME).is_file()

    def test_creates_missing_output_dir(self, tmp_path: Path) -> None:
        FilesystemProjectCreator(tmp_path / "a" / "b").create_project(_validated())
        assert (tmp_path / "a" / "b" / "Foo" / MANIFEST_NAME).is_file()

    def test_existing_directory_is_refused(self, tmp_path: Path) -> None:
        (tmp_path / "Foo").mkdir()
        with pytest.raises(CreationFailedError, match="already exists") as exc_info:
            FilesystemProjectCreator(tmp_path).create_project(_validated())
        assert exc_info.value.hint is not None
        assert list((tmp_path / "Foo").iterdir()) == []

    def test_write_failure_is_wrapped_and_rolled_back(self, tmp_path: Path) -> None:
        real_write_text = Path.write_text

        def failing_write_text(self: Path, *args: object, **kwargs: object) -> int:
            if self.name == README_NAME:
                raise OSError("disk full")
            return real_write_text(self, *args, **kwargs)  # type: ignore[arg-type]

        with patch.object(Path, "write_text", failing_write_text):
            with pytest.raises(CreationFailedError, match="disk full"):
                FilesystemProjectCreator(tmp_path).create_project(_validated())
        assert not (tmp_path / "Foo").exists()


class TestProjectNameContainment:
    @pytest.mark.parametrize(
        "name",
        ["../escaped", "a/b", "a\\b", ".", ".."],
    )
    def test_non_plain_names_are_refused(self, tmp_path: Path, name: str) -> None:
        output_dir = tmp_path / "out"
        with pytest.raises(CreationFailedError, match="not a valid project directory") as exc_info:
            FilesystemProjectCreator(output_dir).create_project(_validated(project_name=name))
        assert exc_info.value.hint is not None
        assert not output_dir.exists()
        assert not (tmp_path / "escaped").exists()

    def test_absolute_name_is_refused(self, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        with pytest.raises(CreationFailedError) as exc_info:
            FilesystemProjectCreator(tmp_path / "out").create_project(
                _validated(project_name=str(target)),
            )
        assert exc_info.value.hint is not None
        assert not target.exists()

    def test_symlink_leading_outside_is_refused(self, tmp_path: Path) -> None:
        output_dir = tmp_path / "out"
        output_dir.mkdir()
        (output_dir / "Foo").symlink_to(tmp_path / "elsewhere")
        with pytest.raises(CreationFailedError, match="outside"):
            FilesystemProjectCreator(output_dir).create_project(_validated())
        assert not (tmp_path / "elsewhere").exists()

    def test_name_with_spaces_is_allowed(self, tmp_path: Path) -> None:
        FilesystemProjectCreator(tmp_path).create_project(_validated(project_name="my project"))
        assert (tmp_path / "my project" / MANIFEST_NAME).is_file()
