"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and UI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations, so the dispatcher never imports a terminal library.
"""

from __future__ import annotations

from typing import Protocol

from playground_wizard.core.models import ValidatedPlayground


class ProjectCreator(Protocol):
    """Contract for project-creation backends.

    Any object that implements :meth:`create_project` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def create_project(self, validated: ValidatedPlayground) -> None:
        """Create the project described by *validated*.

        Called exactly once per run, and only with a snapshot that has
        already passed validation.  Implementations must map every
        backend-specific failure to
        :class:`~playground_wizard.exceptions.CreationFailedError`.

        Raises
        ------
        CreationFailedError
            When the project cannot be created.
        """
        ...  # pragma: no cover


class TextInput(Protocol):
    """A single-line text editor.

    Cursor movement, insertion, deletion, paste and caret blinking are
    the editor's own business; the dispatcher only reads :attr:`value`
    and moves focus.
    """

    value: str

    def focus(self) -> object: ...  # pragma: no cover

    def blur(self) -> object: ...  # pragma: no cover


class ChoiceList(Protocol):
    """A navigable, filterable list of component labels.

    Cursor movement, scrolling and filtering belong to the list.  The
    highlighted entry is always taken from the currently visible
    (filtered) entries.
    """

    def highlighted_label(self) -> str | None:
        """Label of the highlighted visible entry, or ``None`` if none is."""
        ...  # pragma: no cover

    def set_annotation(self, label: str, annotation: str) -> None:
        """Show *annotation* under the entry for *label*."""
        ...  # pragma: no cover

    def set_size(self, width: int, height: int) -> None:
        """Fit the list into *width* columns and *height* rows."""
        ...  # pragma: no cover

    def focus(self) -> object: ...  # pragma: no cover

    def blur(self) -> object: ...  # pragma: no cover
