"""Line-by-line prompt mode for the CLI layer.

An alternative to the full-screen wizard for terminals where a
full-screen UI is unwanted.  It asks the same three questions with
questionary and runs the answers through the same validation gate.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from playground_wizard.core.models import (
    ALL_COMPONENTS,
    Component,
    Playground,
    ValidatedPlayground,
    make_validated,
)
from playground_wizard.exceptions import (
    ChosenComponentsRequiredError,
    EnvironmentError,
    ProjectNameRequiredError,
    TeamNameRequiredError,
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Validators (questionary accepts ``True`` or an error message)
# ---------------------------------------------------------------------------

def _require_project_name(text: str) -> bool | str:
    return True if text.strip() else str(ProjectNameRequiredError())


def _require_team_name(text: str) -> bool | str:
    return True if text.strip() else str(TeamNameRequiredError())


def _require_components(selected: Sequence[Component]) -> bool | str:
    return True if selected else str(ChosenComponentsRequiredError())


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_playground(
    options: Sequence[Component] = ALL_COMPONENTS,
) -> ValidatedPlayground | None:
    """Ask for project name, team name and components.

    Returns
    -------
    ValidatedPlayground | None
        The validated answers, or ``None`` when the user cancelled any
        of the prompts (Ctrl+C / Esc).

    Raises
    ------
    ValidationError
        If the answers fail validation despite the prompt validators.
    """
    questionary = _import_questionary()

    project_name: str | None = questionary.text(
        "Project name:",
        validate=_require_project_name,
    ).ask()
    if project_name is None:
        return None

    team_name: str | None = questionary.text(
        "Team name:",
        validate=_require_team_name,
    ).ask()
    if team_name is None:
        return None

    chosen: list[Component] | None = questionary.checkbox(
        "Choose components:",
        choices=[
            questionary.Choice(title=component.label, value=component)
            for component in options
        ],
        validate=_require_components,
    ).ask()
    if chosen is None:
        return None

    playground = Playground(
        project_name=project_name.strip(),
        team_name=team_name.strip(),
        component_options=tuple(options),
    )
    for component in chosen:
        playground.choose(component)
    return make_validated(playground)
