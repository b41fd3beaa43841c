"""Demo data: two ports with one terminal each."""

import logging

from src.domain.entities import Port, Terminal
from src.ports.clock import ClockPort
from src.ports.repo import PortRepoPort, TerminalRepoPort

logger = logging.getLogger(__name__)

# code, name, terminal name, latitude, longitude
DEMO_PORTS: list[tuple[str, str, str, float, float]] = [
    ("ABCDE", "Port A", "Terminal 1", 40.7128, -74.006),
    ("FGHIJ", "Port B", "Terminal 2", 34.0522, -118.2437),
]


def seed_demo_data(
    port_repo: PortRepoPort, terminal_repo: TerminalRepoPort, clock: ClockPort
) -> int:
    """Insert the demo ports when the store has none. Returns ports created."""
    if port_repo.list_all():
        logger.info("Ports already present, skipping seed")
        return 0

    now = clock.now_utc()
    for code, name, terminal_name, latitude, longitude in DEMO_PORTS:
        port = port_repo.save(Port(code=code, name=name, added_date=now))
        assert port.id is not None
        terminal_repo.save(
            Terminal(
                name=terminal_name,
                port_id=port.id,
                latitude=latitude,
                longitude=longitude,
                is_active=True,
                added_date=now,
            )
        )
        logger.info("Seeded port %s with %s", code, terminal_name)

    return len(DEMO_PORTS)
