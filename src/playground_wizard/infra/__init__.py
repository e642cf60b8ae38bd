"""Infrastructure layer — external system integration.

This layer owns every filesystem write.  Every raw ``OSError`` must be
caught here and re-raised as a
:class:`~playground_wizard.exceptions.WizardError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from playground_wizard.infra.project_creator import FilesystemProjectCreator

__all__: list[str] = [
    "FilesystemProjectCreator",
]
