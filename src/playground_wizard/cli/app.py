"""CLI application entry point for playground-wizard.

This module is the **sole error boundary** for the entire application.
It catches :class:`~playground_wizard.exceptions.WizardError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — form handling is delegated to the core
  dispatcher and project creation to the infrastructure layer.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from playground_wizard.cli import exit_codes
from playground_wizard.cli.console import console, escape
from playground_wizard.core.models import ValidatedPlayground
from playground_wizard.core.protocols import ProjectCreator
from playground_wizard.exceptions import EnvironmentError, WizardError
from playground_wizard.version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="playground-wizard",
        description="Interactively scaffold a new project.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the project directory is created "
        "(default: current directory).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without writing anything.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Ask line-by-line questions instead of the full-screen form.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logs to this file.",
    )
    return parser


def _configure_logging(log_file: Path | None) -> None:
    """Send logs to *log_file*; never to the terminal the UI is drawing on."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format=LOG_FORMAT,
    )


# ---------------------------------------------------------------------------
# Project creators owned by the CLI layer
# ---------------------------------------------------------------------------

def _import_render() -> Any:
    try:
        from playground_wizard.cli import render
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return render


class DryRunProjectCreator:
    """Satisfies :class:`ProjectCreator` by describing, not writing."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def create_project(self, validated: ValidatedPlayground) -> None:
        render = _import_render()
        console.print(render.render_summary(validated))
        console.print(
            f"[dim]Dry run: would create {escape(str(self._output_dir / validated.project_name))}[/dim]",
        )


def _build_creator(args: argparse.Namespace) -> ProjectCreator:
    if args.dry_run:
        return DryRunProjectCreator(args.output_dir)

    from playground_wizard.infra.project_creator import FilesystemProjectCreator

    return FilesystemProjectCreator(args.output_dir)


# ---------------------------------------------------------------------------
# Form collection
# ---------------------------------------------------------------------------

def _collect_interactive() -> ValidatedPlayground | None:
    """Run the full-screen wizard and return its result."""
    try:
        from playground_wizard.cli.tui import run_wizard
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "textual is not installed. Install with: pip install textual",
            hint="Or run with --plain to use line-by-line prompts.",
        ) from exc

    return run_wizard()


def _collect_plain() -> ValidatedPlayground | None:
    from playground_wizard.cli.plain_prompt import prompt_playground

    return prompt_playground()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the playground-wizard CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file)

    validated = _collect_plain() if args.plain else _collect_interactive()
    if validated is None:
        console.print("[yellow]No project created.[/yellow]")
        return exit_codes.SUCCESS

    creator = _build_creator(args)
    creator.create_project(validated)

    if not args.dry_run:
        console.print(
            f"[bold green]Created project[/bold green] {escape(validated.project_name)} "
            f"for team {escape(validated.team_name)}.",
        )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except WizardError as exc:
        logger.error("run failed: %s", exc)
        console.print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.exception("unexpected error")
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
