"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — project created, or the user quit the wizard."""

GENERAL_ERROR: int = 1
"""A known WizardError was caught (e.g. project creation failed)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside the full-screen UI (128 + SIGINT=2)."""
