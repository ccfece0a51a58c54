"""Bookkeeping of connections opened by forward-open requests."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterator


class ConnectionNotFoundError(LookupError):
    """No managed connection matches the requested identifier."""


@dataclass
class ServerConnection:
    """One connection opened by a client."""

    id: int
    ot: int
    to: int
    rpi: timedelta = timedelta(0)
    path: bytes = b""
    open: bool = True


class ConnectionManager:
    """A thread-safe collection of open connections."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._connections: list[ServerConnection] = []
        self._lock = threading.RLock()
        self.logger = logger or logging.getLogger(__name__)

    def add(self, conn: ServerConnection) -> None:
        """Start managing a connection."""
        self.logger.info("New managed connection: %s", conn)
        with self._lock:
            self._connections.append(conn)

    def _find(self, match: Callable[[ServerConnection], bool], what: str) -> ServerConnection:
        with self._lock:
            for conn in self._connections:
                if match(conn):
                    return conn
        raise ConnectionNotFoundError(f"couldn't find connection {what}")

    def get_by_id(self, conn_id: int) -> ServerConnection:
        """Return the connection with the given serial number."""
        return self._find(lambda c: c.id == conn_id, f"{conn_id} by ID")

    def get_by_ot(self, ot: int) -> ServerConnection:
        """Return the connection with the given originator-to-target id."""
        return self._find(lambda c: c.ot == ot, f"{ot} by OT")

    def get_by_to(self, to: int) -> ServerConnection:
        """Return the connection with the given target-to-originator id."""
        return self._find(lambda c: c.to == to, f"{to} by TO")

    def _close(self, match: Callable[[ServerConnection], bool], what: str) -> None:
        with self._lock:
            for index, conn in enumerate(self._connections):
                if match(conn):
                    conn.open = False
                    # The last connection takes the closed one's place.
                    self._connections[index] = self._connections[-1]
                    self._connections.pop()
                    return
        raise ConnectionNotFoundError(f"couldn't find connection {what}")

    def close_by_id(self, conn_id: int) -> None:
        """Mark the connection closed and stop managing it."""
        self._close(lambda c: c.id == conn_id, f"{conn_id} by ID")

    def close_by_ot(self, ot: int) -> None:
        """Mark the connection closed and stop managing it."""
        self._close(lambda c: c.ot == ot, f"{ot} by OT")

    def close_by_to(self, to: int) -> None:
        """Mark the connection closed and stop managing it."""
        self._close(lambda c: c.to == to, f"{to} by TO")

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

    def __iter__(self) -> Iterator[ServerConnection]:
        with self._lock:
            snapshot = list(self._connections)
        return iter(snapshot)