"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed; anything that actually renders a
table or a frame goes through :func:`import_rich` and fails with a
clean :class:`~playground_wizard.exceptions.EnvironmentError`.
"""

from __future__ import annotations

import sys
from typing import Any

from playground_wizard.exceptions import EnvironmentError, WizardError


def import_rich() -> Any:
    """Return the ``rich`` package or raise ``EnvironmentError``."""
    try:
        import rich
        import rich.console
        import rich.markup
        import rich.padding
        import rich.table
        import rich.text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return rich


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    return import_rich().console.Console(stderr=True)


def escape(text: str) -> str:
    """Escape *text* for Rich markup; unchanged on the plain fallback."""
    try:
        rich = import_rich()
    except EnvironmentError:
        return text
    return rich.markup.escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def print_error(self, exc: WizardError) -> None:
        """Render *exc* and its hint, if any."""
        self.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {exc.hint}")


console = _ConsoleProxy()
