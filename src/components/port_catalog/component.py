"""
PortCatalogService - Port registry workflow.

Validates port input, enforces code uniqueness and maps stored ports to views
with their terminals attached.
"""

from __future__ import annotations

import logging

from src.domain.entities import Port, Terminal
from src.domain.errors import Conflict, FieldError, NotFound, ValidationFault
from src.domain.mapping import port_to_view, terminal_to_view
from src.domain.views import PortView
from src.ports.clock import ClockPort
from src.ports.repo import PortRepoPort, TerminalRepoPort

from .models import (
    CODE_MAX_LENGTH,
    CODE_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PortCandidate,
    PortEdit,
)

logger = logging.getLogger(__name__)

DUPLICATE_CODE_MESSAGE = "Port code must be unique."


# --- Validation Functions ---


def validate_port_data(code: str, name: str) -> list[FieldError]:
    """Check code and name lengths."""
    errors: list[FieldError] = []

    if not CODE_MIN_LENGTH <= len(code) <= CODE_MAX_LENGTH:
        errors.append(
            FieldError(
                field="code",
                message=(
                    f"Code must be between {CODE_MIN_LENGTH} and "
                    f"{CODE_MAX_LENGTH} characters"
                ),
            )
        )

    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        errors.append(
            FieldError(
                field="name",
                message=(
                    f"Name must be between {NAME_MIN_LENGTH} and "
                    f"{NAME_MAX_LENGTH} characters"
                ),
            )
        )

    return errors


def _attach_terminals(port: Port, terminals: list[Terminal]) -> PortView:
    return port_to_view(port, [terminal_to_view(t) for t in terminals])


# --- Port Catalog Service ---


class PortCatalogService:
    """
    Port catalog service.

    Terminal cascade on delete belongs to the store, not this service.
    """

    def __init__(
        self, port_repo: PortRepoPort, terminal_repo: TerminalRepoPort, clock: ClockPort
    ) -> None:
        self._ports = port_repo
        self._terminals = terminal_repo
        self._clock = clock

    def list_ports(self) -> list[PortView]:
        by_port: dict[int | None, list[Terminal]] = {}
        for terminal in self._terminals.list_all():
            by_port.setdefault(terminal.port_id, []).append(terminal)

        return [
            _attach_terminals(port, by_port.get(port.id, []))
            for port in self._ports.list_all()
        ]

    def get_port(self, port_id: int) -> PortView:
        port = self._ports.get_by_id(port_id)
        if port is None or port.id is None:
            raise NotFound("Requested resource not found.")
        return _attach_terminals(port, self._terminals.list_by_port(port.id))

    def create_port(self, candidate: PortCandidate) -> PortView:
        errors = validate_port_data(candidate.code, candidate.name)
        if errors:
            raise ValidationFault(errors)

        if self._ports.get_by_code(candidate.code) is not None:
            logger.warning("Port create rejected: code %s already exists", candidate.code)
            raise Conflict(DUPLICATE_CODE_MESSAGE)

        port = Port(
            code=candidate.code,
            name=candidate.name,
            added_date=self._clock.now_utc(),
        )
        saved = self._ports.save(port)
        logger.info("Created port %s (%s)", saved.id, saved.code)
        return port_to_view(saved)

    def update_port(self, edit: PortEdit) -> None:
        errors = validate_port_data(edit.code, edit.name)
        if errors:
            raise ValidationFault(errors)

        existing = self._ports.get_by_id(edit.id)
        if existing is None:
            raise NotFound("Request resource not found to update")

        holder = self._ports.get_by_code(edit.code)
        if holder is not None and holder.id != edit.id:
            logger.warning("Port update rejected: code %s held by port %s", edit.code, holder.id)
            raise Conflict(DUPLICATE_CODE_MESSAGE)

        updated = existing.model_copy(
            update={
                "code": edit.code,
                "name": edit.name,
                "last_edited_date": self._clock.now_utc(),
            }
        )
        self._ports.save(updated)
        logger.info("Updated port %s", edit.id)

    def delete_port(self, port_id: int) -> None:
        if self._ports.get_by_id(port_id) is None:
            raise NotFound("Requested resource not found to delete")

        self._ports.delete(port_id)
        logger.info("Deleted port %s", port_id)
