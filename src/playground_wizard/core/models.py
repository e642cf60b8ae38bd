"""Domain models for playground-wizard.

:class:`Playground` is the only mutable model: it is the in-progress form
state, edited in place by every accepted keystroke or toggle.
:class:`ValidatedPlayground` is a frozen snapshot that can only be built
by :func:`make_validated`, so holding one proves the three validation
rules passed.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum

from playground_wizard.exceptions import (
    ChosenComponentsRequiredError,
    ProjectNameRequiredError,
    TeamNameRequiredError,
)


# ---------------------------------------------------------------------------
# Component enumeration
# ---------------------------------------------------------------------------

class Component(Enum):
    """A selectable unit of project scaffolding.

    The enum value doubles as the display label.
    """

    CLI = "CLI"
    ORACLE_DB = "OracleDB"
    MONGO_DB = "MongoDB"
    NATS_CONSUMER = "NATSConsumer"
    NATS_PRODUCER = "NATSProducer"
    SQLITE_DB = "SqliteDB"
    WEB = "Web"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Component | None:
        """Map a display label to its member, or ``None`` when unknown."""
        try:
            return cls(label)
        except ValueError:
            return None


ALL_COMPONENTS: tuple[Component, ...] = tuple(Component)
"""Every component, in list display order."""


# ---------------------------------------------------------------------------
# Mutable form state
# ---------------------------------------------------------------------------

@dataclass
class Playground:
    """The wizard's in-progress form state."""

    project_name: str = ""
    team_name: str = ""
    chosen_components: set[Component] = field(default_factory=set)
    component_options: tuple[Component, ...] = ALL_COMPONENTS

    def is_chosen(self, component: Component) -> bool:
        return component in self.chosen_components

    def choose(self, component: Component) -> None:
        """Add *component* to the chosen set.

        Raises
        ------
        ValueError
            If *component* is not one of :attr:`component_options`.
        """
        self._require_option(component)
        self.chosen_components.add(component)

    def unchoose(self, component: Component) -> None:
        self._require_option(component)
        self.chosen_components.discard(component)

    def toggle(self, component: Component) -> bool:
        """Flip membership of *component*; return ``True`` if now chosen."""
        if self.is_chosen(component):
            self.unchoose(component)
            return False
        self.choose(component)
        return True

    def _require_option(self, component: Component) -> None:
        if component not in self.component_options:
            raise ValueError(f"{component.label} is not a selectable component")


# ---------------------------------------------------------------------------
# Validation gate
# ---------------------------------------------------------------------------

def validate(playground: Playground) -> None:
    """Check the three form rules in order; the first failure is raised.

    Raises
    ------
    ProjectNameRequiredError
        When ``project_name`` is empty.
    TeamNameRequiredError
        When ``team_name`` is empty.
    ChosenComponentsRequiredError
        When no component is chosen.
    """
    _check_rules(
        playground.project_name,
        playground.team_name,
        playground.chosen_components,
    )


def _check_rules(
    project_name: str,
    team_name: str,
    chosen_components: Collection[Component],
) -> None:
    if not project_name:
        raise ProjectNameRequiredError()
    if not team_name:
        raise TeamNameRequiredError()
    if not chosen_components:
        raise ChosenComponentsRequiredError()


_GATE_TOKEN = object()


@dataclass(frozen=True, slots=True)
class ValidatedPlayground:
    """Immutable snapshot of a :class:`Playground` that passed validation.

    Do not construct directly — use :func:`make_validated`.
    Copies made with :func:`dataclasses.replace` are validated again
    and raise the same errors as :func:`validate`.
    """

    project_name: str
    team_name: str
    chosen_components: frozenset[Component]
    component_options: tuple[Component, ...]
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _GATE_TOKEN:
            raise TypeError("ValidatedPlayground must be created with make_validated()")
        # dataclasses.replace() carries the token over, so the rules are
        # checked again on every construction.
        _check_rules(self.project_name, self.team_name, self.chosen_components)

    @property
    def is_valid(self) -> bool:
        return True

    def ordered_components(self) -> list[Component]:
        """Chosen components in option-list order."""
        return [c for c in self.component_options if c in self.chosen_components]


def make_validated(playground: Playground) -> ValidatedPlayground:
    """Validate *playground* and snapshot it.

    Raises
    ------
    ValidationError
        The same error :func:`validate` raised, unchanged.
    """
    validate(playground)
    return ValidatedPlayground(
        project_name=playground.project_name,
        team_name=playground.team_name,
        chosen_components=frozenset(playground.chosen_components),
        component_options=tuple(playground.component_options),
        _token=_GATE_TOKEN,
    )
