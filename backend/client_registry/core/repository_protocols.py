"""Boundary Protocols — contract between the client store and its callers.

Invariants:
    - Service layer depends on ClientRepository, never on a concrete store
    - Implementations raise RegistryError subclasses, never return error values

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the in-memory store does no IO
"""

from typing import Protocol

from client_registry.core.client import Client


class ClientRepository(Protocol):
    """Contract for client storage, implemented by ClientRegistry."""
    def create(self, candidate: Client) -> Client: ...
    def update(self, key: str, candidate: Client) -> Client: ...
    def delete(self, key: str) -> None: ...
    def search(
        self,
        first_name: str | None = None,
        id_number: str | None = None,
        mobile_number: str | None = None,
    ) -> Client: ...
    def __len__(self) -> int: ...
