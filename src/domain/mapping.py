"""
Explicit conversions between stored records and views.

Each function copies fields by name so the conversion contract stays visible.
Records without an id have not been persisted and cannot be viewed.
"""

from collections.abc import Iterable

from src.domain.entities import Port, Terminal
from src.domain.views import PortView, TerminalView


def _require_id(record_id: int | None, kind: str) -> int:
    if record_id is None:
        raise ValueError(f"{kind} has not been persisted")
    return record_id


def port_to_view(port: Port, terminals: Iterable[TerminalView] = ()) -> PortView:
    return PortView(
        id=_require_id(port.id, "Port"),
        code=port.code,
        name=port.name,
        added_date=port.added_date,
        last_edited_date=port.last_edited_date,
        terminals=list(terminals),
    )


def terminal_to_view(terminal: Terminal, port: PortView | None = None) -> TerminalView:
    return TerminalView(
        id=_require_id(terminal.id, "Terminal"),
        name=terminal.name,
        port_id=terminal.port_id,
        latitude=terminal.latitude,
        longitude=terminal.longitude,
        is_active=terminal.is_active,
        added_date=terminal.added_date,
        last_edited_date=terminal.last_edited_date,
        port=port,
    )
