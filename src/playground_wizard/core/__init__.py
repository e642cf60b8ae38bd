"""Core layer — form state, validation and the input state machine.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from playground_wizard.core.dispatcher import (
    InputDispatcher,
    Notification,
    Outcome,
    WizardState,
)
from playground_wizard.core.events import KeyPress, Resize
from playground_wizard.core.focus import FocusController, FocusTarget
from playground_wizard.core.keymap import DEFAULT_KEYMAP, Action, KeyBinding, KeyMap
from playground_wizard.core.models import (
    Component,
    Playground,
    ValidatedPlayground,
    make_validated,
    validate,
)
from playground_wizard.core.protocols import ChoiceList, ProjectCreator, TextInput

__all__: list[str] = [
    "DEFAULT_KEYMAP",
    "Action",
    "ChoiceList",
    "Component",
    "FocusController",
    "FocusTarget",
    "InputDispatcher",
    "KeyBinding",
    "KeyMap",
    "KeyPress",
    "Notification",
    "Outcome",
    "Playground",
    "ProjectCreator",
    "Resize",
    "TextInput",
    "ValidatedPlayground",
    "WizardState",
    "make_validated",
    "validate",
]
