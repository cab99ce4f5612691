"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IdNumber and MobileNumber wrap str; never pass untyped strings as keys
    - ID_NUMBER_LENGTH (13) and MOBILE_NUMBER_PATTERN are the single source of truth
    - All error kinds encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

IdNumber = NewType("IdNumber", str)
MobileNumber = NewType("MobileNumber", str)


# ─── Constants ───────────────────────────────────────────────────

ID_NUMBER_LENGTH: int = 13

# Optional +27 or leading 0, a digit 6-8, then 8 more digits
MOBILE_NUMBER_PATTERN: str = r"^(\+27|0)[6-8][0-9]{8}$"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Every distinguishable failure the registry can signal."""
    EMPTY_INPUT = "EMPTY_INPUT"
    NON_DIGIT = "NON_DIGIT"
    WRONG_LENGTH = "WRONG_LENGTH"
    INVALID_ID_NUMBER = "INVALID_ID_NUMBER"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_MOBILE_NUMBER = "DUPLICATE_MOBILE_NUMBER"
    CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"
