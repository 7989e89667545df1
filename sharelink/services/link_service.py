"""
Short Link Service

This service handles the core business logic of the short link service:
- Validating incoming link metadata
- Deriving the content-addressed short id
- Writing and reading records through the link store

Design Decisions:
- Write if derived, not write if absent: the same content always maps to
  the same id, so creating it twice overwrites identical bytes
- No collision check between derivation and storage; two different records
  sharing an id is an accepted, negligible risk
- No retries; every store failure is raised to the caller
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from sharelink.core.exceptions import InvalidInputError
from sharelink.core.validators import REQUIRED_FIELDS, require_fields
from sharelink.db.models import LinkRecord
from sharelink.services.id_deriver import SHORT_ID_LENGTH, derive_short_id
from sharelink.services.link_store import LinkStore
from sharelink.services.record_codec import canonicalize

logger = logging.getLogger(__name__)


class LinkService:
    """
    Create and look up short links.

    Separated from the API layer so it can be exercised against any
    LinkStore implementation.
    """

    def __init__(self, store: LinkStore, id_length: int = SHORT_ID_LENGTH):
        """
        Args:
            store: Link store to persist records in
            id_length: Number of characters in derived short ids
        """
        self.store = store
        self.id_length = id_length

    def derive_id(self, record: LinkRecord) -> str:
        """Return the short id of ``record``."""
        return derive_short_id(canonicalize(record), length=self.id_length)

    async def create_link(self, payload: Mapping[str, Any]) -> str:
        """
        Validate ``payload``, store it and return its short id.

        Only ``title``, ``description`` and ``redirectUrl`` are kept; other
        keys are ignored and do not affect the id.

        Raises:
            InvalidInputError: if a required field is missing or empty
            StoreError: if the write fails
        """
        require_fields(payload)

        try:
            record = LinkRecord.model_validate({key: payload[key] for key in REQUIRED_FIELDS})
        except ValidationError as e:
            location = e.errors()[0]["loc"]
            raise InvalidInputError(str(location[0]) if location else REQUIRED_FIELDS[0]) from e
        short_id = self.derive_id(record)

        await self.store.put(short_id, record)
        logger.info(f"Short link stored: {short_id} -> {record.redirect_url}")
        return short_id

    async def get_link(self, short_id: str) -> LinkRecord:
        """
        Return the record stored under ``short_id``.

        Raises:
            LinkNotFoundError: nothing stored under the id
            CorruptRecordError: stored value is unreadable
            StoreError: if the read fails
        """
        return await self.store.get(short_id)
