"""Allow ``python -m playground_wizard`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m playground_wizard`` behaves identically to the
``playground-wizard`` console script.
"""

from __future__ import annotations

from playground_wizard.cli.app import cli

if __name__ == "__main__":
    cli()
