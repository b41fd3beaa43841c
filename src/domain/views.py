"""
Read-side views returned to API clients.

A PortView embeds its terminals, a TerminalView embeds its parent port.
Embedding is one level deep: terminals inside a port carry no port, and the
port inside a terminal carries no terminals.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TerminalView(CamelModel):
    id: int
    name: str
    port_id: int
    latitude: float
    longitude: float
    is_active: bool
    added_date: datetime
    last_edited_date: datetime | None = None
    port: "PortView | None" = None


class PortView(CamelModel):
    id: int
    code: str
    name: str
    added_date: datetime
    last_edited_date: datetime | None = None
    terminals: list[TerminalView] = []


TerminalView.model_rebuild()
