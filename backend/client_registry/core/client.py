"""Client — the single domain entity held by the registry.

Invariants:
    - Frozen: a returned Client can never mutate registry state
    - id_number is the registry key at creation time
"""

from dataclasses import dataclass

from client_registry.core.domain_types import IdNumber, MobileNumber


@dataclass(frozen=True)
class Client:
    """A registered client. Pure value object, no IO."""

    first_name: str
    last_name: str
    mobile_number: MobileNumber
    id_number: IdNumber
    physical_address: str | None = None
