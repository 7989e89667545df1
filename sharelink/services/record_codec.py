"""
Link record serialization.

The canonical form is compact JSON with a fixed key order
(title, description, redirectUrl), non-ASCII characters written as-is,
UTF-8 encoded. The same bytes are hashed into the short id and stored as
the value, so the serialization must never depend on input key order.
"""

import json
from typing import Optional

from pydantic import ValidationError

from sharelink.core.exceptions import CorruptRecordError
from sharelink.db.models import LinkRecord

CANONICAL_KEYS = ("title", "description", "redirectUrl")


def canonicalize(record: LinkRecord) -> bytes:
    """Serialize ``record`` to its canonical bytes."""
    payload = {
        "title": record.title,
        "description": record.description,
        "redirectUrl": record.redirect_url,
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_record(data: bytes, short_id: Optional[str] = None) -> LinkRecord:
    """
    Parse stored bytes back into a LinkRecord.

    Extra keys are ignored; missing, empty or non-string fields are not.

    Raises:
        CorruptRecordError: if the bytes are not a readable record
    """
    try:
        payload = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise CorruptRecordError(short_id, reason="not valid JSON", original_error=e) from e

    if not isinstance(payload, dict):
        raise CorruptRecordError(short_id, reason="not a JSON object")

    for key in CANONICAL_KEYS:
        if not isinstance(payload.get(key), str):
            raise CorruptRecordError(short_id, reason=f"field '{key}' missing or not a string")

    try:
        return LinkRecord.model_validate({key: payload[key] for key in CANONICAL_KEYS})
    except ValidationError as e:
        raise CorruptRecordError(short_id, reason="invalid field values", original_error=e) from e
