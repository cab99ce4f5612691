"""Client Routes — create, update, search and delete client records.

Invariants:
    - Request bodies validated by ClientRequest before reaching the handler
    - Every success returns HTTP 200 with resultCode 0 and an api-fm-01x code
    - Registry errors are not caught here; the global handler maps them

Design Decisions:
    - Verb-named paths (/create, /update/{idNumber}, ...) kept for existing clients
    - Search accepts phoneNumber as an alternative name for mobileNumber
"""

import logging

from fastapi import APIRouter, Depends, Query

from client_registry.schemas.client import (
    ClientPayload, ClientRequest, ClientResponse,
)
from client_registry.services.client_service import ClientService
from client_registry.api.dependencies import get_client_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1/clients", tags=["clients"])


@router.post("/create", response_model=ClientResponse[ClientPayload])
async def create_client(
    body: ClientRequest,
    service: ClientService = Depends(get_client_service),
):
    """Register a new client."""
    client = service.create_client(body)
    return ClientResponse[ClientPayload](
        result_message_code="api-fm-012",
        result_message="Client created successfully.",
        friendly_customer_message="Your client has been created.",
        payload=ClientPayload.from_client(client),
    )


@router.put("/update/{id_number}", response_model=ClientResponse[ClientPayload])
async def update_client(
    id_number: str,
    body: ClientRequest,
    service: ClientService = Depends(get_client_service),
):
    """Replace the client stored under id_number."""
    client = service.update_client(id_number, body)
    return ClientResponse[ClientPayload](
        result_message_code="api-fm-013",
        result_message="Client updated successfully.",
        friendly_customer_message="Your client has been updated.",
        payload=ClientPayload.from_client(client),
    )


@router.get("/search", response_model=ClientResponse[ClientPayload])
async def search_client(
    first_name: str | None = Query(None, alias="firstName"),
    id_number: str | None = Query(None, alias="idNumber"),
    mobile_number: str | None = Query(None, alias="mobileNumber"),
    phone_number: str | None = Query(None, alias="phoneNumber"),
    service: ClientService = Depends(get_client_service),
):
    """Find the first client matching every given criterion."""
    client = service.search_client(
        first_name=first_name,
        id_number=id_number,
        mobile_number=mobile_number if mobile_number is not None else phone_number,
    )
    return ClientResponse[ClientPayload](
        result_message_code="api-fm-014",
        result_message="Client found successfully.",
        friendly_customer_message="Client found.",
        payload=ClientPayload.from_client(client),
    )


@router.delete("/delete/{id_number}", response_model=ClientResponse[str])
async def delete_client(
    id_number: str,
    service: ClientService = Depends(get_client_service),
):
    """Remove the client stored under id_number."""
    service.delete_client(id_number)
    logger.info("Client deleted", extra={"id_number": id_number})
    return ClientResponse[str](
        result_message_code="api-fm-015",
        result_message="Client deleted successfully.",
        friendly_customer_message="Your client has been deleted.",
        payload=id_number,
    )
