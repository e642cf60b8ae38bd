"""Shared pytest fixtures and configuration for the playground-wizard test suite.

Guidelines
----------
* Core tests must be pure — no terminal, no filesystem.
* Filesystem tests write only under ``tmp_path``.
* questionary is mocked at the CLI boundary; Textual runs headless.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from playground_wizard.core.dispatcher import InputDispatcher, WizardState
from playground_wizard.core.events import KeyPress
from playground_wizard.core.keymap import DEFAULT_KEYMAP, KeyMap
from playground_wizard.core.models import Playground


class FakeTextInput:
    """In-memory text input: tracks value and focus only."""

    def __init__(self) -> None:
        self.value = ""
        self.focused = False

    def focus(self) -> FakeTextInput:
        self.focused = True
        return self

    def blur(self) -> FakeTextInput:
        self.focused = False
        return self


class FakeChoiceList:
    """In-memory component list with a movable highlight."""

    def __init__(self, labels: Sequence[str]) -> None:
        self.labels = list(labels)
        self.annotations = dict.fromkeys(self.labels, "")
        self.highlighted = 0
        self.size: tuple[int, int] | None = None
        self.focused = False

    def highlight(self, label: str) -> None:
        self.highlighted = self.labels.index(label)

    def highlighted_label(self) -> str | None:
        return self.labels[self.highlighted] if self.labels else None

    def set_annotation(self, label: str, annotation: str) -> None:
        self.annotations[label] = annotation

    def set_size(self, width: int, height: int) -> None:
        self.size = (width, height)

    def focus(self) -> FakeChoiceList:
        self.focused = True
        return self

    def blur(self) -> FakeChoiceList:
        self.focused = False
        return self


def _make_dispatcher(
    playground: Playground | None = None,
    *,
    labels: Sequence[str] | None = None,
    keymap: KeyMap = DEFAULT_KEYMAP,
) -> InputDispatcher:
    playground = playground if playground is not None else Playground()
    if labels is None:
        labels = [c.label for c in playground.component_options]
    return InputDispatcher(
        WizardState(
            playground=playground,
            project_input=FakeTextInput(),
            team_input=FakeTextInput(),
            choices=FakeChoiceList(labels),
            keymap=keymap,
        ),
    )


DispatcherFactory = Callable[..., InputDispatcher]


@pytest.fixture
def make_dispatcher() -> DispatcherFactory:
    """Factory: ``make_dispatcher(playground=None, *, labels=None, keymap=...)``."""
    return _make_dispatcher


@pytest.fixture
def dispatcher() -> InputDispatcher:
    """A fresh dispatcher with the default key map and empty form."""
    return _make_dispatcher()


@pytest.fixture
def list_dispatcher(dispatcher: InputDispatcher) -> InputDispatcher:
    """A fresh dispatcher with focus moved to the component list."""
    dispatcher.handle(KeyPress("tab"))
    dispatcher.handle(KeyPress("tab"))
    return dispatcher
