"""Client Schemas — request validation messages and camelCase serialization.

Tests cover:
    - Missing/blank names, mobile pattern, ID presence and length
    - Checksum is NOT a schema concern (13 bad digits still validate)
    - Envelope and payload serialize with camelCase keys
"""

import pytest
from pydantic import ValidationError

from client_registry.schemas.client import (
    ClientPayload, ClientRequest, ClientResponse,
)
from tests.factories import INVALID_CHECKSUM_ID, VALID_ID_A, client_body, make_client


def _first_message(exc_info) -> str:
    return str(exc_info.value.errors()[0]["ctx"]["error"])


def test_valid_body_parses_from_camel_case():
    request = ClientRequest.model_validate(client_body())
    assert request.first_name == "John"
    assert request.id_number == VALID_ID_A
    assert request.physical_address == "123 Elm Street"


def test_to_client_builds_domain_record():
    client = ClientRequest.model_validate(client_body()).to_client()
    assert client == make_client()


def test_physical_address_is_optional():
    body = client_body()
    del body["physicalAddress"]
    assert ClientRequest.model_validate(body).physical_address is None


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("firstName", "   ", "First name is mandatory."),
        ("lastName", "", "Last name is mandatory."),
        ("mobileNumber", "0512345678", "Mobile number is invalid."),
        ("mobileNumber", "081234567", "Mobile number is invalid."),
        ("mobileNumber", "0812345678\n", "Mobile number is invalid."),
        ("idNumber", " ", "ID number is mandatory."),
        ("idNumber", "901104800081", "ID number must be exactly 13 digits."),
    ],
)
def test_invalid_field_reports_fixed_message(field, value, message):
    with pytest.raises(ValidationError) as exc_info:
        ClientRequest.model_validate(client_body(**{field: value}))
    assert _first_message(exc_info) == message


@pytest.mark.parametrize(
    "field, message",
    [
        ("firstName", "First name is mandatory."),
        ("lastName", "Last name is mandatory."),
        ("mobileNumber", "Mobile number is invalid."),
        ("idNumber", "ID number is mandatory."),
    ],
)
def test_missing_field_reports_same_message_as_blank(field, message):
    body = client_body()
    del body[field]
    with pytest.raises(ValidationError) as exc_info:
        ClientRequest.model_validate(body)
    assert _first_message(exc_info) == message


@pytest.mark.parametrize("mobile", ["0612345678", "0723456789", "0834567890", "+27612345678"])
def test_accepted_mobile_formats(mobile):
    assert ClientRequest.model_validate(client_body(mobileNumber=mobile)).mobile_number == mobile


def test_checksum_is_not_checked_by_schema():
    request = ClientRequest.model_validate(client_body(idNumber=INVALID_CHECKSUM_ID))
    assert request.id_number == INVALID_CHECKSUM_ID


def test_errors_follow_field_order():
    with pytest.raises(ValidationError) as exc_info:
        ClientRequest.model_validate({})
    assert _first_message(exc_info) == "First name is mandatory."
    assert len(exc_info.value.errors()) == 4


def test_payload_serializes_camel_case():
    payload = ClientPayload.from_client(make_client())
    assert payload.model_dump(by_alias=True) == {
        "firstName": "John",
        "lastName": "Doe",
        "mobileNumber": "0812345678",
        "idNumber": VALID_ID_A,
        "physicalAddress": "123 Elm Street",
    }


def test_envelope_defaults_result_code_zero():
    envelope = ClientResponse[str](
        result_message_code="api-fm-015",
        result_message="Client deleted successfully.",
        friendly_customer_message="Your client has been deleted.",
        payload=VALID_ID_A,
    )
    assert envelope.model_dump(by_alias=True) == {
        "resultCode": 0,
        "resultMessageCode": "api-fm-015",
        "resultMessage": "Client deleted successfully.",
        "friendlyCustomerMessage": "Your client has been deleted.",
        "payload": VALID_ID_A,
    }
