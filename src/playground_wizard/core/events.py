"""Discrete input events consumed by the input dispatcher.

These are toolkit-neutral: the runtime layer converts whatever its
terminal library delivers into one of these before dispatching.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyPress:
    """A single key press.

    ``key`` is the normalised key name (``"tab"``, ``"shift+tab"``,
    ``"ctrl+c"``, ``"a"`` ...).
    """

    key: str


@dataclass(frozen=True, slots=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int


WizardEvent = KeyPress | Resize
