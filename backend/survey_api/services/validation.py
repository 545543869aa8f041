"""
Survey API Backend: Input Checks Shared by Services
======================================================

What:  Identifier parsing and required-field presence checks.
Why:   Both rules answer 400 with a ValidationError before any database
       round trip, so a malformed id never reaches the query layer as a
       generic failure.
"""

import uuid
from typing import Any, Dict, Sequence

from survey_api.exceptions import ValidationError


def parse_document_id(raw: str, resource: str = "document") -> uuid.UUID:
    """
    Convert a client-supplied identifier into a UUID.

    Raises:
        ValidationError: `raw` is not a well-formed identifier.
    """
    try:
        return uuid.UUID(str(raw))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(
            message=f"'{raw}' is not a valid {resource} id.",
            field="id",
        )


def is_blank(value: Any) -> bool:
    """None and empty strings count as missing."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(values: Dict[str, Any], required: Sequence[str], message: str) -> None:
    """
    Raise a single ValidationError when any of `required` is blank.

    `message` names the whole required set, which is what clients display;
    the missing names go into details.
    """
    missing = [name for name in required if is_blank(values.get(name))]
    if missing:
        raise ValidationError(
            message=message,
            context={"missing": missing},
        )
