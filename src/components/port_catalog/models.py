"""
Port catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

CODE_MIN_LENGTH = 5
CODE_MAX_LENGTH = 10
NAME_MIN_LENGTH = 5
NAME_MAX_LENGTH = 100


# --- Input Models ---


@dataclass(frozen=True)
class PortCandidate:
    """Input for creating a port."""

    code: str
    name: str


@dataclass(frozen=True)
class PortEdit:
    """Input for updating a port. Only code and name are editable."""

    id: int
    code: str
    name: str
