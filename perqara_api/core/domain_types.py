"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int — store-assigned, never reused while the row exists
    - Sex has exactly two members; membership is checked at the input boundary only

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# Largest id accepted from a path parameter (signed 64-bit column)
MAX_USER_ID = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Sex(str, Enum):
    """Allowed values for User.sex."""
    MALE = "male"
    FEMALE = "female"
