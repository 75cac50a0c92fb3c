"""User ID Parsing — converts a raw path segment into a UserId.

Invariants:
    - Accepts ASCII decimal digits only (no sign, whitespace, or underscores)
    - Result is within 0..MAX_USER_ID
    - Any rejection raises InvalidUserIdError (rendered as plain-text 400)
"""

from perqara_api.core.domain_types import MAX_USER_ID, UserId
from perqara_api.core.errors import InvalidUserIdError


def parse_user_id(raw: str) -> UserId:
    """Parse a path parameter into a UserId or raise InvalidUserIdError."""
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidUserIdError(raw)
    value = int(raw)
    if value > MAX_USER_ID:
        raise InvalidUserIdError(raw)
    return UserId(value)
