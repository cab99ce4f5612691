"""Route Dependencies — process-wide registry and per-request service.

Invariants:
    - Exactly one ClientRegistry per process (_registry); routes reach it only
      through get_registry, so tests can override it
    - State lives for the process lifetime and is lost on restart
"""

from fastapi import Depends

from client_registry.core.client_registry import ClientRegistry
from client_registry.core.repository_protocols import ClientRepository
from client_registry.services.client_service import ClientService

_registry = ClientRegistry()


def get_registry() -> ClientRepository:
    return _registry


def get_client_service(
    registry: ClientRepository = Depends(get_registry),
) -> ClientService:
    return ClientService(registry)
