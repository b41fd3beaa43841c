"""
Terminals component - Terminals owned by a port, names unique per port.
"""

from .component import DUPLICATE_NAME_MESSAGE, TerminalService, validate_terminal_data
from .models import TerminalCandidate, TerminalEdit

__all__ = [
    "TerminalService",
    "validate_terminal_data",
    "DUPLICATE_NAME_MESSAGE",
    "TerminalCandidate",
    "TerminalEdit",
]
