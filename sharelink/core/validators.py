"""
Input Validators

Validation helpers used in front of the link store:
- require_fields: the create-time gate for required record fields
- sanitize_short_id: path segment check before a lookup
"""

import re
from typing import Any, Mapping, Optional, Sequence

from sharelink.core.exceptions import InvalidInputError

REQUIRED_FIELDS = ("title", "description", "redirectUrl")

SHORT_ID_PATTERN = re.compile(r"[0-9A-Za-z_-]{1,64}")


def require_fields(payload: Mapping[str, Any], fields: Sequence[str] = REQUIRED_FIELDS) -> None:
    """
    Ensure every field in ``fields`` is present and non-empty.

    Fields are checked in order; the first missing one is reported.
    Non-string values count as missing, as do strings that cannot be
    encoded as UTF-8 (lone surrogates from JSON escapes like "\\ud800").

    Raises:
        InvalidInputError: naming the first missing or empty field
    """
    for field in fields:
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            raise InvalidInputError(field)
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidInputError(field)


def sanitize_short_id(short_id: str) -> Optional[str]:
    """
    Sanitize and validate a short id taken from a URL path.

    Ids are URL-safe tokens: letters, digits, '-' and '_', at most 64 chars
    (the key column width). Anything else cannot name a stored record.

    Surrounding whitespace is not trimmed: the path must name the stored
    key exactly.

    Returns:
        The short id if valid, None otherwise
    """
    if not short_id or not isinstance(short_id, str):
        return None

    if not SHORT_ID_PATTERN.fullmatch(short_id):
        return None

    return short_id
