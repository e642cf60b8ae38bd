"""Input dispatcher — routes wizard events to focus, domain and widgets.

The dispatcher is the wizard's controller.  Each call to
:meth:`InputDispatcher.handle` processes exactly one event to completion
and reports what the runtime loop must do next through an
:class:`Outcome`: show notifications, exit, exit with a validated
result, or let the focused widget have the key.

Guarantees
----------
* No I/O and no terminal-library imports; widgets are reached only
  through :class:`~playground_wizard.core.protocols.TextInput` and
  :class:`~playground_wizard.core.protocols.ChoiceList`.
* The toggle key never reaches a text field.
* Validation failures are reported as notifications, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from playground_wizard.core.events import KeyPress, Resize, WizardEvent
from playground_wizard.core.focus import FocusController, FocusTarget
from playground_wizard.core.keymap import DEFAULT_KEYMAP, Action, KeyMap
from playground_wizard.core.models import (
    Component,
    Playground,
    ValidatedPlayground,
    make_validated,
)
from playground_wizard.core.protocols import ChoiceList, TextInput
from playground_wizard.exceptions import ValidationError

logger = logging.getLogger(__name__)

SELECTED_ANNOTATION = "[X]"
UNSELECTED_ANNOTATION = ""

# Rows the form reserves above and below the list.
FORM_CHROME_LINES = 8
# Vertical/horizontal padding around the whole frame.
FRAME_PADDING = (1, 2)


# ---------------------------------------------------------------------------
# State & results
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class WizardState:
    """Everything the dispatcher mutates."""

    playground: Playground
    project_input: TextInput
    team_input: TextInput
    choices: ChoiceList
    focus: FocusController = field(default_factory=FocusController)
    keymap: KeyMap = DEFAULT_KEYMAP

    def input_for(self, target: FocusTarget) -> TextInput | ChoiceList:
        if target is FocusTarget.PROJECT_NAME:
            return self.project_input
        if target is FocusTarget.TEAM_NAME:
            return self.team_input
        return self.choices


@dataclass(frozen=True, slots=True)
class Notification:
    """A transient status message for the user."""

    message: str
    severity: Literal["information", "warning", "error"] = "information"


@dataclass(slots=True)
class Outcome:
    """What the loop must do after one event has been handled.

    ``handled`` is ``False`` when the key is not bound to any action;
    the runtime then passes it on to the focused widget.
    """

    handled: bool = True
    quit: bool = False
    submitted: ValidatedPlayground | None = None
    notifications: list[Notification] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class InputDispatcher:
    """Maps wizard events onto state changes.

    Construction mirrors the playground into the widgets (field values
    and list annotations) and focuses the region the focus controller
    points at.

    Parameters
    ----------
    state:
        The wizard state to drive.  Its ``keymap`` decides which key
        triggers which :class:`~playground_wizard.core.keymap.Action`.
    """

    def __init__(self, state: WizardState) -> None:
        self.state = state
        playground = state.playground
        state.project_input.value = playground.project_name
        state.team_input.value = playground.team_name
        for component in playground.chosen_components:
            state.choices.set_annotation(component.label, SELECTED_ANNOTATION)
        self._sync_focus(previous=None)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def handle(self, event: WizardEvent) -> Outcome:
        if isinstance(event, Resize):
            self._resize(event)
            return Outcome()
        return self._handle_key(event)

    def _handle_key(self, event: KeyPress) -> Outcome:
        action = self.state.keymap.action_for(event.key)
        if action is None:
            return Outcome(handled=False)
        return self.perform(action)

    def perform(self, action: Action) -> Outcome:
        if action is Action.QUIT:
            return Outcome(quit=True)
        if action is Action.ADVANCE:
            self.advance()
        elif action is Action.RETREAT:
            self.retreat()
        elif action is Action.TOGGLE:
            return self.toggle()
        elif action is Action.ACCEPT:
            self.accept()
        elif action is Action.SUBMIT:
            return self.submit()
        return Outcome()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def advance(self) -> None:
        previous = self.state.focus.current
        target = self.state.focus.advance()
        logger.debug("focus advanced to %s", target.name)
        self._sync_focus(previous)

    def retreat(self) -> None:
        previous = self.state.focus.current
        target = self.state.focus.retreat()
        logger.debug("focus retreated to %s", target.name)
        self._sync_focus(previous)

    def focus_moved(self, target: FocusTarget) -> None:
        """Record a focus change the terminal toolkit already carried out."""
        if not self.state.focus.is_focused(target):
            self.state.focus.move_to(target)
            logger.debug("focus moved to %s", target.name)

    def toggle(self) -> Outcome:
        """Add or remove the highlighted component.

        Ignored unless the component list has focus, and for labels
        that do not name a known component.
        """
        if not self.state.focus.is_focused(FocusTarget.COMPONENT_LIST):
            return Outcome()

        label = self.state.choices.highlighted_label()
        component = Component.from_label(label) if label is not None else None
        if component is None:
            logger.debug("toggle ignored for unknown entry %r", label)
            return Outcome()

        if self.state.playground.toggle(component):
            annotation, verb = SELECTED_ANNOTATION, "added"
        else:
            annotation, verb = UNSELECTED_ANNOTATION, "removed"
        self.state.choices.set_annotation(component.label, annotation)
        logger.debug("component %s %s", component.label, verb)
        return Outcome(notifications=[Notification(f"{component.label} {verb}")])

    def accept(self) -> None:
        """Copy the text inputs into the playground."""
        self.state.playground.project_name = self.state.project_input.value
        self.state.playground.team_name = self.state.team_input.value

    def submit(self) -> Outcome:
        """Accept, validate, and hand back a snapshot if the form is valid."""
        self.accept()
        try:
            validated = make_validated(self.state.playground)
        except ValidationError as exc:
            logger.debug("submit rejected: %s", exc)
            return Outcome(notifications=[Notification(str(exc), severity="error")])
        logger.debug("submit accepted for project %r", validated.project_name)
        return Outcome(quit=True, submitted=validated)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sync_focus(self, previous: FocusTarget | None) -> None:
        """Blur the region that lost focus, then focus the current one."""
        current = self.state.focus.current
        if previous is not None and previous is not current:
            self.state.input_for(previous).blur()
        self.state.input_for(current).focus()

    def _resize(self, event: Resize) -> None:
        vertical, horizontal = FRAME_PADDING
        width = max(1, event.width - 2 * horizontal)
        height = max(1, event.height - 2 * vertical - FORM_CHROME_LINES)
        self.state.choices.set_size(width, height)
        logger.debug("resized to %dx%d, list %dx%d", event.width, event.height, width, height)
