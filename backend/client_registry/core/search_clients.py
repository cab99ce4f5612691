"""Client Search — multi-criteria matching over stored clients.

Invariants:
    - None criteria are wildcards (always match)
    - All given criteria must match (logical AND)
    - first_name compares case-insensitively; id_number and mobile_number exactly
"""

from collections.abc import Iterable

from client_registry.core.client import Client


def matches_criteria(
    client: Client,
    first_name: str | None = None,
    id_number: str | None = None,
    mobile_number: str | None = None,
) -> bool:
    """Check a single client against the search criteria. Pure."""
    if first_name is not None and client.first_name.lower() != first_name.lower():
        return False
    if id_number is not None and client.id_number != id_number:
        return False
    if mobile_number is not None and client.mobile_number != mobile_number:
        return False
    return True


def find_first_match(
    clients: Iterable[Client],
    first_name: str | None = None,
    id_number: str | None = None,
    mobile_number: str | None = None,
) -> Client | None:
    """Return the first client matching every given criterion, or None."""
    return next(
        (
            c for c in clients
            if matches_criteria(c, first_name, id_number, mobile_number)
        ),
        None,
    )
