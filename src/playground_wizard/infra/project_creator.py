"""Filesystem-backed implementation of :class:`~playground_wizard.core.protocols.ProjectCreator`.

This module is the **only** place in the codebase that writes project
files.  Every ``OSError`` is caught here and re-raised as
:class:`~playground_wizard.exceptions.CreationFailedError` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from playground_wizard.core.models import ValidatedPlayground
from playground_wizard.exceptions import CreationFailedError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "project.json"
README_NAME = "README.md"
_SEPARATORS = frozenset(filter(None, ("/", "\\", os.sep, os.altsep)))


class FilesystemProjectCreator:
    """Write a project skeleton under *output_dir*.

    Layout::

        <output_dir>/<project_name>/
            project.json   — name, team and chosen components
            README.md      — human-readable summary

    The project name must be a single directory name: no path
    separators, not ``.`` or ``..``, and never resolving outside
    *output_dir*.  The target directory must not already exist.  If
    writing fails part-way, the files already written are removed again.
    """

    def __init__(self, output_dir: Path) -> None:
        self._output_dir: Path = output_dir

    def project_dir(self, validated: ValidatedPlayground) -> Path:
        return self._output_dir / validated.project_name

    @staticmethod
    def build_manifest(validated: ValidatedPlayground) -> dict[str, Any]:
        return {
            "name": validated.project_name,
            "team": validated.team_name,
            "components": [c.label for c in validated.ordered_components()],
        }

    @staticmethod
    def build_readme(validated: ValidatedPlayground) -> str:
        lines = [
            f"# {validated.project_name}",
            "",
            f"Owned by team **{validated.team_name}**.",
            "",
            "## Components",
            "",
        ]
        lines.extend(f"- {c.label}" for c in validated.ordered_components())
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def create_project(self, validated: ValidatedPlayground) -> None:
        """Create the project directory and its files.

        Raises
        ------
        CreationFailedError
            When the project name is not a plain directory name, the
            directory exists already, or any write fails.
        """
        target = self._checked_project_dir(validated)
        if target.exists():
            raise CreationFailedError(
                f"{target} already exists.",
                hint="Choose another project name or --output-dir.",
            )

        written: list[Path] = []
        try:
            target.mkdir(parents=True)
            manifest = target / MANIFEST_NAME
            manifest.write_text(
                json.dumps(self.build_manifest(validated), indent=2) + "\n",
                encoding="utf-8",
            )
            written.append(manifest)
            readme = target / README_NAME
            readme.write_text(self.build_readme(validated), encoding="utf-8")
            written.append(readme)
        except OSError as exc:
            self._rollback(target, written)
            raise CreationFailedError(
                f"Could not create project at {target}: {exc}",
            ) from exc

        logger.info(
            "created project %s for team %s at %s",
            validated.project_name,
            validated.team_name,
            target,
        )

    def _checked_project_dir(self, validated: ValidatedPlayground) -> Path:
        name = validated.project_name
        hint = "Use a plain directory name such as \"my-project\"."
        if name in (".", "..") or any(sep in name for sep in _SEPARATORS):
            raise CreationFailedError(
                f"{name!r} is not a valid project directory name.",
                hint=hint,
            )
        target = self.project_dir(validated)
        root = self._output_dir.resolve()
        if target.resolve().parent != root:
            raise CreationFailedError(
                f"{name!r} would be created outside {root}.",
                hint=hint,
            )
        return target

    @staticmethod
    def _rollback(target: Path, written: list[Path]) -> None:
        for path in reversed(written):
            path.unlink(missing_ok=True)
        try:
            target.rmdir()
        except OSError:
            logger.warning("could not remove partially created %s", target)
