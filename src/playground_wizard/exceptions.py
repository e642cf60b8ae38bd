"""Custom exception hierarchy for playground-wizard.

All exceptions that cross layer boundaries must inherit from
:class:`WizardError`.  Raw OS or third-party exceptions must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
WizardError
├── ValidationError
│   ├── ProjectNameRequiredError
│   ├── TeamNameRequiredError
│   └── ChosenComponentsRequiredError
├── CreationFailedError
├── EnvironmentError
└── WizardRuntimeError
"""

from __future__ import annotations


class WizardError(Exception):
    """Base exception for all playground-wizard errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation (recoverable inside the UI loop) ---------------------------

class ValidationError(WizardError):
    """Raised when the form state fails one of the validation rules."""


class ProjectNameRequiredError(ValidationError):
    """Raised when the project name is empty."""

    def __init__(self) -> None:
        super().__init__("project name is required")


class TeamNameRequiredError(ValidationError):
    """Raised when the team name is empty."""

    def __init__(self) -> None:
        super().__init__("team name is required")


class ChosenComponentsRequiredError(ValidationError):
    """Raised when no component has been chosen."""

    def __init__(self) -> None:
        super().__init__("at least one component must be chosen")


# --- Project creation (terminal) -------------------------------------------

class CreationFailedError(WizardError):
    """Raised when the project-creation collaborator cannot finish."""


# --- Environment / runtime -------------------------------------------------

class EnvironmentError(WizardError):
    """Raised when a required runtime dependency is not available."""


class WizardRuntimeError(WizardError):
    """Raised when the interactive loop terminates with an error code."""
