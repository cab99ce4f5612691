"""ID Number Validation — checksum check for 13-digit South African ID numbers.

Invariants:
    - validate is PURE: no state, no IO, same input → same result
    - Input checks run in fixed order: empty → non-digit → length
    - Malformed input raises; a well-formed number with a bad checksum returns False
"""

from client_registry.core.domain_types import ID_NUMBER_LENGTH
from client_registry.core.errors import (
    IdNumberEmptyError, IdNumberNonDigitError, IdNumberLengthError,
)

_DIGITS = frozenset("0123456789")


def validate(id_number: str | None) -> bool:
    """Return True iff id_number is 13 digits whose weighted sum is divisible by 10.

    Digits are weighted 1, 2, 1, 2, ... from the left; a product above 9 is
    folded by adding its two digits.
    """
    if not id_number:
        raise IdNumberEmptyError()
    # str.isdigit() also accepts non-ASCII digits such as "٣"
    if not set(id_number) <= _DIGITS:
        raise IdNumberNonDigitError()
    if len(id_number) != ID_NUMBER_LENGTH:
        raise IdNumberLengthError(len(id_number))

    total = 0
    multiplier = 1
    for char in id_number:
        product = int(char) * multiplier
        if product > 9:
            product = product // 10 + product % 10
        total += product
        multiplier = 2 if multiplier == 1 else 1

    return total % 10 == 0
