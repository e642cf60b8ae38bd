"""playground-wizard — interactive project scaffolding wizard.

Collects a project name, a team name and a set of components in a
terminal form, validates them, and creates the project.
"""

from playground_wizard.version import __version__

__all__: list[str] = ["__version__"]
