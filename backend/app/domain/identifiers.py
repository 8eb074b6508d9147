"""Document identifier format checks.

Store-generated keys travel as 24-character hexadecimal strings (the text
form of a 12-byte ObjectId). Anything else is rejected before a store call.
"""

import re

from app.domain.exceptions import InvalidIdentifierError

_IDENTIFIER_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def is_valid_identifier(value: object) -> bool:
    return isinstance(value, str) and _IDENTIFIER_RE.fullmatch(value) is not None


def require_identifier(value: str, entity_type: str) -> str:
    """Return *value* unchanged, or raise InvalidIdentifierError."""
    if not is_valid_identifier(value):
        raise InvalidIdentifierError(entity_type, value)
    return value
