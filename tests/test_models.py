"""Tests for domain models and the validation gate (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from playground_wizard.core.models import (
    ALL_COMPONENTS,
    Component,
    Playground,
    ValidatedPlayground,
    make_validated,
    validate,
)
from playground_wizard.exceptions import (
    ChosenComponentsRequiredError,
    ProjectNameRequiredError,
    TeamNameRequiredError,
    ValidationError,
)


def _playground(**overrides: object) -> Playground:
    defaults: dict[str, object] = {
        "project_name": "Foo",
        "team_name": "Bar",
        "chosen_components": {Component.CLI},
    }
    defaults.update(overrides)
    return Playground(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------

class TestComponent:
    def test_closed_set_in_display_order(self) -> None:
        assert [c.label for c in ALL_COMPONENTS] == [
            "CLI",
            "OracleDB",
            "MongoDB",
            "NATSConsumer",
            "NATSProducer",
            "SqliteDB",
            "Web",
        ]

    @pytest.mark.parametrize("component", list(Component))
    def test_from_label_round_trips_every_member(self, component: Component) -> None:
        assert Component.from_label(component.label) is component

    @pytest.mark.parametrize("label", ["", "cli", "Postgres", " Web"])
    def test_from_label_unknown_is_none(self, label: str) -> None:
        assert Component.from_label(label) is None


# ---------------------------------------------------------------------------
# Playground
# ---------------------------------------------------------------------------

class TestPlayground:
    def test_starts_empty_with_full_option_list(self) -> None:
        p = Playground()
        assert p.project_name == ""
        assert p.team_name == ""
        assert p.chosen_components == set()
        assert p.component_options == ALL_COMPONENTS

    def test_instances_do_not_share_chosen_set(self) -> None:
        a, b = Playground(), Playground()
        a.choose(Component.WEB)
        assert b.chosen_components == set()

    def test_toggle_reports_new_membership(self) -> None:
        p = Playground()
        assert p.toggle(Component.MONGO_DB) is True
        assert p.toggle(Component.MONGO_DB) is False
        assert p.chosen_components == set()

    def test_choose_is_idempotent(self) -> None:
        p = Playground()
        p.choose(Component.CLI)
        p.choose(Component.CLI)
        assert p.chosen_components == {Component.CLI}

    def test_rejects_component_outside_options(self) -> None:
        p = Playground(component_options=(Component.CLI,))
        with pytest.raises(ValueError, match="Web"):
            p.choose(Component.WEB)
        assert p.chosen_components == set()


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

class TestValidate:
    def test_valid_playground_passes(self) -> None:
        validate(_playground())

    @pytest.mark.parametrize(
        ("team_name", "chosen"),
        [("", set()), ("Bar", set()), ("", {Component.CLI}), ("Bar", {Component.WEB})],
    )
    def test_empty_project_name_always_reported_first(
        self, team_name: str, chosen: set[Component],
    ) -> None:
        p = _playground(project_name="", team_name=team_name, chosen_components=chosen)
        with pytest.raises(ProjectNameRequiredError):
            validate(p)

    def test_empty_team_name_reported_before_components(self) -> None:
        with pytest.raises(TeamNameRequiredError):
            validate(_playground(team_name="", chosen_components=set()))

    def test_no_components(self) -> None:
        with pytest.raises(ChosenComponentsRequiredError):
            validate(_playground(chosen_components=set()))

    def test_errors_are_validation_errors(self) -> None:
        with pytest.raises(ValidationError, match="project name is required"):
            validate(Playground())


# ---------------------------------------------------------------------------
# make_validated / ValidatedPlayground
# ---------------------------------------------------------------------------

class TestMakeValidated:
    def test_snapshot_copies_fields(self) -> None:
        v = make_validated(_playground(chosen_components={Component.CLI, Component.WEB}))
        assert v.project_name == "Foo"
        assert v.team_name == "Bar"
        assert v.chosen_components == frozenset({Component.CLI, Component.WEB})
        assert v.is_valid is True

    def test_empty_playground_fails_with_project_name(self) -> None:
        with pytest.raises(ProjectNameRequiredError):
            make_validated(Playground())

    def test_snapshot_is_isolated_from_later_edits(self) -> None:
        p = _playground()
        v = make_validated(p)
        p.project_name = "Changed"
        p.choose(Component.WEB)
        assert v.project_name == "Foo"
        assert v.chosen_components == frozenset({Component.CLI})

    def test_snapshot_is_frozen(self) -> None:
        v = make_validated(_playground())
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.project_name = "x"  # type: ignore[misc]

    def test_direct_construction_is_refused(self) -> None:
        with pytest.raises(TypeError, match="make_validated"):
            ValidatedPlayground(
                project_name="Foo",
                team_name="Bar",
                chosen_components=frozenset({Component.CLI}),
                component_options=ALL_COMPONENTS,
            )

    def test_ordered_components_follow_option_order(self) -> None:
        v = make_validated(
            _playground(chosen_components={Component.WEB, Component.CLI, Component.SQLITE_DB}),
        )
        assert v.ordered_components() == [Component.CLI, Component.SQLITE_DB, Component.WEB]

    @pytest.mark.parametrize(
        ("changes", "error"),
        [
            ({"project_name": ""}, ProjectNameRequiredError),
            ({"team_name": ""}, TeamNameRequiredError),
            ({"chosen_components": frozenset()}, ChosenComponentsRequiredError),
        ],
    )
    def test_replace_cannot_smuggle_invalid_fields(
        self, changes: dict[str, object], error: type[Exception],
    ) -> None:
        v = make_validated(_playground())
        with pytest.raises(error):
            dataclasses.replace(v, **changes)

    def test_replace_with_valid_fields_keeps_gate(self) -> None:
        v = dataclasses.replace(make_validated(_playground()), project_name="Other")
        assert v.project_name == "Other"
        assert v.is_valid is True
