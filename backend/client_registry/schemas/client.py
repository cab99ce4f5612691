"""Client Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ClientRequest: non-blank names, mobile matches MOBILE_NUMBER_PATTERN,
      non-blank 13-character ID number; checksum is NOT checked here (core/)
    - JSON uses camelCase (firstName, idNumber, ...); Python uses snake_case
    - Each validator raises one fixed, user-facing message per field

Design Decisions:
    - Missing fields default to None and are rejected by the same validator as
      blank ones, so "missing" and "blank" report the same message
    - ClientResponse is generic over its payload (client record or ID string)
"""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from client_registry.core.client import Client
from client_registry.core.domain_types import (
    ID_NUMBER_LENGTH, MOBILE_NUMBER_PATTERN, IdNumber, MobileNumber,
)

_MOBILE_RE = re.compile(MOBILE_NUMBER_PATTERN)

PayloadT = TypeVar("PayloadT")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClientRequest(_CamelModel):
    """Create/update request body. Syntactic validation only."""
    first_name: str | None = Field(None, validate_default=True)
    last_name: str | None = Field(None, validate_default=True)
    mobile_number: str | None = Field(None, validate_default=True)
    id_number: str | None = Field(None, validate_default=True)
    physical_address: str | None = None

    @field_validator("first_name")
    @classmethod
    def check_first_name(cls, v: str | None) -> str:
        return _require_text(v, "First name is mandatory.")

    @field_validator("last_name")
    @classmethod
    def check_last_name(cls, v: str | None) -> str:
        return _require_text(v, "Last name is mandatory.")

    @field_validator("mobile_number")
    @classmethod
    def check_mobile_number(cls, v: str | None) -> str:
        if v is None or not _MOBILE_RE.fullmatch(v):
            raise ValueError("Mobile number is invalid.")
        return v

    @field_validator("id_number")
    @classmethod
    def check_id_number(cls, v: str | None) -> str:
        v = _require_text(v, "ID number is mandatory.")
        if len(v) != ID_NUMBER_LENGTH:
            raise ValueError("ID number must be exactly 13 digits.")
        return v

    def to_client(self) -> Client:
        return Client(
            first_name=self.first_name,
            last_name=self.last_name,
            mobile_number=MobileNumber(self.mobile_number),
            id_number=IdNumber(self.id_number),
            physical_address=self.physical_address,
        )


class ClientPayload(_CamelModel):
    """Public-facing client record."""
    first_name: str
    last_name: str
    mobile_number: str
    id_number: str
    physical_address: str | None = None

    @classmethod
    def from_client(cls, client: Client) -> "ClientPayload":
        return cls(
            first_name=client.first_name,
            last_name=client.last_name,
            mobile_number=client.mobile_number,
            id_number=client.id_number,
            physical_address=client.physical_address,
        )


class ClientResponse(_CamelModel, Generic[PayloadT]):
    """Standard response envelope shared by success and error responses."""
    result_code: int = 0
    result_message_code: str
    result_message: str
    friendly_customer_message: str
    payload: PayloadT | None = None


def _require_text(v: str | None, message: str) -> str:
    if v is None or not v.strip():
        raise ValueError(message)
    return v
