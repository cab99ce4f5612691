"""Client Service — maps request schemas onto registry calls, with call logging.

Invariants:
    - Every public method is wrapped by log_call("Service")
    - RegistryError propagates unchanged to the caller (API error handler)
    - Returned records are core Client objects; routes build the envelope
"""

from client_registry.core.client import Client
from client_registry.core.repository_protocols import ClientRepository
from client_registry.infrastructure.observability import log_call
from client_registry.schemas.client import ClientRequest


class ClientService:
    """Thin shell over a ClientRepository."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    @log_call("Service")
    def create_client(self, request: ClientRequest) -> Client:
        return self._repository.create(request.to_client())

    @log_call("Service")
    def update_client(self, id_number: str, request: ClientRequest) -> Client:
        return self._repository.update(id_number, request.to_client())

    @log_call("Service")
    def search_client(
        self,
        first_name: str | None = None,
        id_number: str | None = None,
        mobile_number: str | None = None,
    ) -> Client:
        return self._repository.search(
            first_name=first_name,
            id_number=id_number,
            mobile_number=mobile_number,
        )

    @log_call("Service")
    def delete_client(self, id_number: str) -> None:
        self._repository.delete(id_number)

    def client_count(self) -> int:
        return len(self._repository)
