"""Client Registry — authoritative in-memory store of client records.

Invariants:
    - id_number unique across all stored clients (by key and by record)
    - mobile_number unique across all stored clients
    - Every stored id_number passed the checksum validator
    - Write checks run in fixed order: duplicate ID → checksum → duplicate mobile
    - A failed write leaves the collection unchanged
    - Every operation runs under one lock (check + mutation atomic as a unit)

Design Decisions:
    - dict keyed by ID number: insertion-ordered, so search order is deterministic
    - update keeps the original key and skips the record under that key in both
      uniqueness scans (a client can be updated without changing its ID)
    - threading.Lock, not asyncio.Lock: the registry is sync and adapter-agnostic
"""

import threading
from collections.abc import Iterator

from client_registry.core.client import Client
from client_registry.core.errors import (
    ClientNotFoundError, DuplicateIdError, DuplicateMobileNumberError,
    InvalidIdNumberError,
)
from client_registry.core.search_clients import find_first_match
from client_registry.core.validate_id_number import validate


class ClientRegistry:
    """In-memory client store enforcing ID and mobile-number uniqueness."""

    def __init__(self) -> None:
        self._clients: dict[str, Client] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._clients

    def create(self, candidate: Client) -> Client:
        """Store a new client under its ID number."""
        with self._lock:
            self._check_writable(candidate)
            self._clients[candidate.id_number] = candidate
            return candidate

    def update(self, key: str, candidate: Client) -> Client:
        """Replace the client stored under key, keeping the same slot."""
        with self._lock:
            if key not in self._clients:
                raise ClientNotFoundError(key)
            self._check_writable(candidate, exclude_key=key)
            self._clients[key] = candidate
            return candidate

    def delete(self, key: str) -> None:
        with self._lock:
            if key not in self._clients:
                raise ClientNotFoundError(key)
            del self._clients[key]

    def search(
        self,
        first_name: str | None = None,
        id_number: str | None = None,
        mobile_number: str | None = None,
    ) -> Client:
        """First client (insertion order) matching every given criterion.

        With no criteria at all, the first stored client is returned.
        """
        with self._lock:
            found = find_first_match(
                self._clients.values(), first_name, id_number, mobile_number,
            )
        if found is None:
            raise ClientNotFoundError()
        return found

    # ─── Internals (caller holds the lock) ──────────────────────────

    def _others(self, exclude_key: str | None) -> Iterator[tuple[str, Client]]:
        return (
            (k, c) for k, c in self._clients.items() if k != exclude_key
        )

    def _check_writable(
        self, candidate: Client, exclude_key: str | None = None,
    ) -> None:
        id_number = candidate.id_number
        if any(
            k == id_number or c.id_number == id_number
            for k, c in self._others(exclude_key)
        ):
            raise DuplicateIdError(id_number)

        if not validate(id_number):
            raise InvalidIdNumberError(id_number)

        if any(
            c.mobile_number == candidate.mobile_number
            for _, c in self._others(exclude_key)
        ):
            raise DuplicateMobileNumberError(candidate.mobile_number)
