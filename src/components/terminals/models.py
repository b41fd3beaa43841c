"""
Terminals component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class TerminalCandidate:
    """Input for creating a terminal under an existing port."""

    name: str
    port_id: int
    latitude: float
    longitude: float
    is_active: bool = True


@dataclass(frozen=True)
class TerminalEdit:
    """Input for updating a terminal."""

    id: int
    name: str
    port_id: int
    latitude: float
    longitude: float
    is_active: bool
