"""Full-screen wizard runtime built on Textual.

Textual owns the event loop, the terminal and the widgets: the two name
fields are :class:`~textual.widgets.Input` editors and the component
chooser is an :class:`~textual.widgets.OptionList`.  Every key is first
offered to the :class:`~playground_wizard.core.dispatcher.InputDispatcher`;
keys it has no action for fall through to the focused widget.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.fuzzy import Matcher
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from playground_wizard.cli.render import render_help, render_option
from playground_wizard.core.dispatcher import InputDispatcher, Outcome, WizardState
from playground_wizard.core.events import KeyPress, Resize
from playground_wizard.core.focus import FocusTarget
from playground_wizard.core.keymap import DEFAULT_KEYMAP, KeyMap
from playground_wizard.core.models import Playground, ValidatedPlayground
from playground_wizard.exceptions import WizardRuntimeError

logger = logging.getLogger(__name__)

NAME_CHAR_LIMIT = 64
NOTIFICATION_TIMEOUT = 1.0
ERROR_NOTIFICATION_TIMEOUT = 3.0

_TARGET_BY_ID = {
    "project-name": FocusTarget.PROJECT_NAME,
    "team-name": FocusTarget.TEAM_NAME,
    "components": FocusTarget.COMPONENT_LIST,
}


def _offer_to_wizard(widget: Widget, event: events.Key) -> bool:
    """Let the wizard act on *event* before *widget* does.

    Returns ``True`` when the key was consumed; the widget's own key
    handling is then skipped.
    """
    screen = widget.screen
    if not isinstance(screen, WizardScreen) or not screen.route_key(event.key):
        return False
    event.stop()
    event.prevent_default()
    return True


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

class NameInput(Input):
    """Single-line name editor."""

    def on_key(self, event: events.Key) -> None:
        _offer_to_wizard(self, event)


class ComponentOptionList(OptionList):
    """Component chooser with fuzzy filtering.

    ``/`` starts a filter, printable keys extend it, ``backspace``
    shortens it and ``escape`` clears it.  Only matching components
    stay in the list, so the highlighted entry always belongs to the
    filtered view.
    """

    def __init__(self, labels: Sequence[str], *, id: str | None = None) -> None:
        super().__init__(
            *(Option(render_option(label, ""), id=label) for label in labels),
            id=id,
        )
        self._labels = list(labels)
        self._visible = list(labels)
        self._annotations = dict.fromkeys(labels, "")
        self.filter_text = ""
        self.filtering = False
        self.border_title = "Choose components"

    # ChoiceList -------------------------------------------------------

    def highlighted_label(self) -> str | None:
        option = self.highlighted_option
        return option.id if option is not None else None

    def set_annotation(self, label: str, annotation: str) -> None:
        if label not in self._annotations:
            return
        self._annotations[label] = annotation
        if label in self._visible:
            self.replace_option_prompt(label, render_option(label, annotation))

    def set_size(self, width: int, height: int) -> None:
        self.styles.width = width
        self.styles.height = height

    # Filtering --------------------------------------------------------

    @property
    def visible_labels(self) -> list[str]:
        return list(self._visible)

    def apply_filter(self, query: str) -> None:
        """Show only the components matching *query*."""
        keep = self.highlighted_label()
        matcher = Matcher(query)
        self.filter_text = query
        self._visible = [
            label for label in self._labels if not query or matcher.match(label) > 0
        ]
        self.set_options(
            Option(render_option(label, self._annotations[label]), id=label)
            for label in self._visible
        )
        if self._visible:
            self.highlighted = (
                self._visible.index(keep) if keep in self._visible else 0
            )
        self.border_subtitle = f"/{query}" if self.filtering else ""
        logger.debug("filter %r shows %s", query, self._visible)

    def on_key(self, event: events.Key) -> None:
        if _offer_to_wizard(self, event):
            return
        if not self.filtering:
            if event.key != "slash":
                return
            self.filtering = True
            self.apply_filter("")
        elif event.key == "escape":
            self.filtering = False
            self.apply_filter("")
        elif event.key == "backspace":
            self.apply_filter(self.filter_text[:-1])
        elif event.is_printable and event.character:
            self.apply_filter(self.filter_text + event.character)
        else:
            return
        event.stop()
        event.prevent_default()


# ---------------------------------------------------------------------------
# Screen & app
# ---------------------------------------------------------------------------

class WizardScreen(Screen[None]):
    """The single screen of the wizard."""

    DEFAULT_CSS = """
    WizardScreen {
        padding: 1 2;
    }
    WizardScreen #names {
        height: auto;
        margin-bottom: 1;
    }
    WizardScreen NameInput {
        width: 1fr;
        border: tall #585858;
    }
    WizardScreen NameInput:focus {
        border: tall #ff5fd7;
    }
    WizardScreen ComponentOptionList {
        border: tall #585858;
    }
    WizardScreen ComponentOptionList:focus {
        border: tall #ff5fd7;
    }
    WizardScreen #help {
        margin-top: 1;
    }
    """

    def __init__(self, playground: Playground, keymap: KeyMap) -> None:
        super().__init__()
        self.playground = playground
        self.keymap = keymap
        self.dispatcher: InputDispatcher | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="names"):
            yield NameInput(
                placeholder="enter your project name",
                max_length=NAME_CHAR_LIMIT,
                select_on_focus=False,
                id="project-name",
            )
            yield NameInput(
                placeholder="enter your team name",
                max_length=NAME_CHAR_LIMIT,
                select_on_focus=False,
                id="team-name",
            )
        yield ComponentOptionList(
            [c.label for c in self.playground.component_options],
            id="components",
        )
        yield Static(render_help(self.keymap), id="help")

    def on_mount(self) -> None:
        self.dispatcher = InputDispatcher(
            WizardState(
                playground=self.playground,
                project_input=self.query_one("#project-name", NameInput),
                team_input=self.query_one("#team-name", NameInput),
                choices=self.query_one("#components", ComponentOptionList),
                keymap=self.keymap,
            ),
        )
        self._apply(self.dispatcher.handle(Resize(self.size.width, self.size.height)))

    def route_key(self, key: str) -> bool:
        """Dispatch *key*; ``True`` when the wizard consumed it."""
        if self.dispatcher is None:
            return False
        outcome = self.dispatcher.handle(KeyPress(key))
        self._apply(outcome)
        return outcome.handled

    def on_key(self, event: events.Key) -> None:
        # Focused widgets offer their keys themselves.
        if self.focused is None:
            _offer_to_wizard(self, event)

    def on_resize(self, event: events.Resize) -> None:
        if self.dispatcher is not None:
            self._apply(
                self.dispatcher.handle(Resize(event.size.width, event.size.height)),
            )

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        # Read the settled focus; blur() may have passed through a sibling first.
        focused = self.focused
        target = _TARGET_BY_ID.get(focused.id or "") if focused is not None else None
        if target is not None and self.dispatcher is not None:
            self.dispatcher.focus_moved(target)

    def _apply(self, outcome: Outcome) -> None:
        for notification in outcome.notifications:
            self.app.notify(
                notification.message,
                severity=notification.severity,
                timeout=(
                    ERROR_NOTIFICATION_TIMEOUT
                    if notification.severity == "error"
                    else NOTIFICATION_TIMEOUT
                ),
                markup=False,
            )
        if outcome.quit:
            self.app.exit(outcome.submitted)


class WizardApp(App[ValidatedPlayground]):
    """Textual application hosting :class:`WizardScreen`.

    The return value is the validated playground when the user
    submitted the form, or ``None`` when they quit.
    """

    TITLE = "playground-wizard"
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        playground: Playground | None = None,
        keymap: KeyMap = DEFAULT_KEYMAP,
    ) -> None:
        super().__init__()
        self.playground = playground if playground is not None else Playground()
        self.keymap = keymap
        self.wizard_screen: WizardScreen | None = None

    def get_default_screen(self) -> Screen:
        self.wizard_screen = WizardScreen(self.playground, self.keymap)
        return self.wizard_screen


def run_wizard(
    playground: Playground | None = None,
    keymap: KeyMap = DEFAULT_KEYMAP,
) -> ValidatedPlayground | None:
    """Run the full-screen wizard until the user quits or submits.

    Raises
    ------
    WizardRuntimeError
        When the Textual loop ends with a non-zero return code.
    """
    app = WizardApp(playground, keymap)
    result = app.run()
    if app.return_code:
        raise WizardRuntimeError(
            f"The terminal UI stopped unexpectedly (code {app.return_code}).",
        )
    logger.debug("wizard finished, submitted=%s", result is not None)
    return result
