"""Render adapter — wizard values to Rich renderables.

Every function in this module is a **pure** transformation of the values
it is given: nothing here mutates the playground or the widgets.  Focus
emphasis is left to the terminal UI's stylesheet, which derives it from
focus state alone.
"""

from __future__ import annotations

from rich.style import Style
from rich.table import Table
from rich.text import Text

from playground_wizard.core.keymap import KeyMap
from playground_wizard.core.models import ValidatedPlayground

ANNOTATION_STYLE = Style(color="color(168)")
HELP_STYLE = Style(color="color(241)")


def render_option(label: str, annotation: str) -> Text:
    """A two-row list entry: the label, then its annotation."""
    text = Text(label)
    text.append("\n")
    # An empty annotation still takes its row.
    text.append(annotation or " ", style=ANNOTATION_STYLE)
    return text


def render_help(keymap: KeyMap) -> Text:
    return Text(
        " • ".join(f"{key} {desc}" for key, desc in keymap.help_entries()),
        style=HELP_STYLE,
    )


def render_summary(validated: ValidatedPlayground) -> Table:
    """A two-column table describing the project about to be created."""
    table = Table(
        title="Project",
        show_header=False,
        border_style="dim",
    )
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Name", Text(validated.project_name))
    table.add_row("Team", Text(validated.team_name))
    table.add_row(
        "Components",
        Text(", ".join(c.label for c in validated.ordered_components())),
    )
    return table
