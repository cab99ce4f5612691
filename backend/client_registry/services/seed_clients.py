"""Demo Data — optional startup seeding of two sample clients.

Invariants:
    - Seeding goes through ClientService.create_client (same checks as the API)
    - Only runs when settings.seed_demo_clients is true
"""

import logging

from client_registry.schemas.client import ClientRequest
from client_registry.services.client_service import ClientService

logger = logging.getLogger(__name__)

DEMO_CLIENTS: tuple[ClientRequest, ...] = (
    ClientRequest(
        first_name="John", last_name="Doe", mobile_number="0712345678",
        id_number="9601104800087", physical_address="123 Elm Street",
    ),
    ClientRequest(
        first_name="Jane", last_name="Smith", mobile_number="0723456789",
        id_number="9901104800081", physical_address="456 Maple Avenue",
    ),
)


def seed_demo_clients(service: ClientService) -> int:
    """Create the demo clients. Returns how many were added."""
    for request in DEMO_CLIENTS:
        service.create_client(request)
    logger.info(f"Demo clients seeded: {len(DEMO_CLIENTS)}")
    return len(DEMO_CLIENTS)
