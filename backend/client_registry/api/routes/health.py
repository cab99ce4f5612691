"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /v1/health/ always returns 200 if the process is up
    - Reports the number of stored clients; never exposes client data
"""

import logging

from fastapi import APIRouter, Depends, status

from client_registry.api.dependencies import get_client_service
from client_registry.config import get_settings
from client_registry.services.client_service import ClientService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(service: ClientService = Depends(get_client_service)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "client-registry-api",
        "version": get_settings().api_version,
        "clients": service.client_count(),
    }
