"""
TerminalService - Terminal workflow.

Terminal names are unique per parent port, not globally. Every terminal view
carries its parent port, resolved by a lookup after the primary read.
"""

from __future__ import annotations

import logging

from src.domain.entities import Terminal
from src.domain.errors import Conflict, FieldError, NotFound, ValidationFault
from src.domain.mapping import port_to_view, terminal_to_view
from src.domain.views import PortView, TerminalView
from src.ports.clock import ClockPort
from src.ports.repo import PortRepoPort, TerminalRepoPort

from .models import NAME_MAX_LENGTH, TerminalCandidate, TerminalEdit

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Terminal name must be unique for the port."


def validate_terminal_data(name: str) -> list[FieldError]:
    errors: list[FieldError] = []

    if not name or not name.strip():
        errors.append(FieldError(field="name", message="Name is required"))
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(
            FieldError(
                field="name",
                message=f"Name must be {NAME_MAX_LENGTH} characters or less",
            )
        )

    return errors


class TerminalService:
    def __init__(
        self, terminal_repo: TerminalRepoPort, port_repo: PortRepoPort, clock: ClockPort
    ) -> None:
        self._terminals = terminal_repo
        self._ports = port_repo
        self._clock = clock

    def _port_view(self, port_id: int) -> PortView | None:
        port = self._ports.get_by_id(port_id)
        return port_to_view(port) if port else None

    def _require_port(self, port_id: int) -> None:
        if self._ports.get_by_id(port_id) is None:
            raise NotFound(f"Port {port_id} not found.")

    def list_terminals(self) -> list[TerminalView]:
        ports = {port.id: port_to_view(port) for port in self._ports.list_all()}
        return [
            terminal_to_view(terminal, ports.get(terminal.port_id))
            for terminal in self._terminals.list_all()
        ]

    def get_terminal(self, terminal_id: int) -> TerminalView:
        terminal = self._terminals.get_by_id(terminal_id)
        if terminal is None:
            raise NotFound("Requested resource not found.")
        return terminal_to_view(terminal, self._port_view(terminal.port_id))

    def create_terminal(self, candidate: TerminalCandidate) -> TerminalView:
        errors = validate_terminal_data(candidate.name)
        if errors:
            raise ValidationFault(errors)

        if self._terminals.get_by_name_and_port(candidate.name, candidate.port_id):
            logger.warning(
                "Terminal create rejected: %s already exists in port %s",
                candidate.name,
                candidate.port_id,
            )
            raise Conflict(DUPLICATE_NAME_MESSAGE)

        self._require_port(candidate.port_id)

        terminal = Terminal(
            name=candidate.name,
            port_id=candidate.port_id,
            latitude=candidate.latitude,
            longitude=candidate.longitude,
            is_active=candidate.is_active,
            added_date=self._clock.now_utc(),
        )
        saved = self._terminals.save(terminal)
        assert saved.id is not None
        logger.info("Created terminal %s in port %s", saved.id, saved.port_id)

        # Re-read so the response carries the resolved parent port
        return self.get_terminal(saved.id)

    def update_terminal(self, edit: TerminalEdit) -> None:
        errors = validate_terminal_data(edit.name)
        if errors:
            raise ValidationFault(errors)

        existing = self._terminals.get_by_id(edit.id)
        if existing is None:
            raise NotFound("Request resource not found to update")

        holder = self._terminals.get_by_name_and_port(edit.name, edit.port_id)
        if holder is not None and holder.id != edit.id:
            logger.warning(
                "Terminal update rejected: %s already exists in port %s",
                edit.name,
                edit.port_id,
            )
            raise Conflict(DUPLICATE_NAME_MESSAGE)

        if edit.port_id != existing.port_id:
            self._require_port(edit.port_id)

        updated = existing.model_copy(
            update={
                "name": edit.name,
                "port_id": edit.port_id,
                "latitude": edit.latitude,
                "longitude": edit.longitude,
                "is_active": edit.is_active,
                "last_edited_date": self._clock.now_utc(),
            }
        )
        self._terminals.save(updated)
        logger.info("Updated terminal %s", edit.id)

    def delete_terminal(self, terminal_id: int) -> None:
        if self._terminals.get_by_id(terminal_id) is None:
            raise NotFound("Requested resource not found to delete")

        self._terminals.delete(terminal_id)
        logger.info("Deleted terminal %s", terminal_id)
