"""Dispatch of CIP paths to the endpoints that serve them."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Sequence


class PathNotFoundError(LookupError):
    """No endpoint is registered for a CIP path."""


class TagNotFoundError(LookupError):
    """A tag that was read does not exist."""


class UnsupportedOperationError(RuntimeError):
    """The endpoint does not provide this kind of access."""


class CIPEndpoint(ABC):
    """Handles incoming class 3 tag access and class 1 IO messages.

    An endpoint that serves only some of these should raise
    :class:`UnsupportedOperationError` from the others.
    """

    @abstractmethod
    def tag_read(self, tag: str, qty: int) -> Any:
        """Return the value of ``qty`` elements of ``tag``."""

    @abstractmethod
    def tag_write(self, tag: str, value: Any) -> None:
        """Store ``value`` in ``tag``."""

    @abstractmethod
    def io_read(self) -> bytes:
        """Return the input data to send to the controller on each RPI."""

    @abstractmethod
    def io_write(self, items: Sequence[Any]) -> None:
        """Accept the items of an incoming class 1 output message."""


class PathRouter:
    """Maps CIP route bytes to endpoints, much like a mux maps URLs."""

    def __init__(self) -> None:
        self.paths: dict[bytes, CIPEndpoint] = {}

    def handle(self, path: bytes | bytearray | Sequence[int], endpoint: CIPEndpoint) -> None:
        """Register ``endpoint`` for ``path``, replacing any earlier one."""
        self.paths[bytes(path)] = endpoint

    def resolve(self, path: bytes | bytearray | Sequence[int]) -> CIPEndpoint:
        """Return the endpoint registered for ``path``."""
        key = bytes(path)
        try:
            return self.paths[key]
        except KeyError:
            raise PathNotFoundError(f"path {list(key)} not recognized") from None


_SEQUENCE_TYPES = (list, bytes, bytearray)


class MapTagProvider(CIPEndpoint):
    """A thread-safe tag store backed by a dict.

    Tag names are lower-cased.  Writing an unknown tag creates it; reading one
    raises :class:`TagNotFoundError`.  Array indices and structure members are
    not interpreted: "tag[3]" and "udt.field" are literal keys.  Class 1 IO is
    refused with :class:`UnsupportedOperationError`.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = {} if data is None else data
        self._lock = threading.Lock()

    def io_read(self) -> bytes:
        """Refuse: a map of tags has no class 1 input assembly."""
        name = type(self).__name__
        raise UnsupportedOperationError(f"{name} serves tag access only; it has no IO input data")

    def io_write(self, items: Sequence[Any]) -> None:
        """Refuse: a map of tags cannot take class 1 output data."""
        name = type(self).__name__
        raise UnsupportedOperationError(
            f"{name} serves tag access only; cannot accept {len(items)} IO items"
        )

    def tag_read(self, tag: str, qty: int) -> Any:
        """Return the tag's value; for a sequence, its first ``qty`` elements."""
        tag = tag.lower()
        with self._lock:
            try:
                value = self.data[tag]
            except KeyError:
                raise TagNotFoundError(f"tag {tag} not in map") from None
        if isinstance(value, _SEQUENCE_TYPES):
            if qty < 0:
                raise ValueError(f"negative element count {qty} requested")
            if qty <= len(value):
                return value[:qty]
            raise ValueError(f"too many elements requested {qty} > {len(value)}")
        return value

    def tag_write(self, tag: str, value: Any) -> None:
        """Store ``value`` under the lower-cased tag name."""
        with self._lock:
            self.data[tag.lower()] = value