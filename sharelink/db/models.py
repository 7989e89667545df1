"""
Data Models for the Short Link Service

This module defines:
- LinkRecord: the three-field payload persisted under a short id
- LinkEntry: the key-value table row holding a record's canonical bytes

Design Decisions:
- The table is a plain key-value map (key -> bytes); the store never
  queries record fields, so they are not broken out into columns
- LinkRecord has no identity field; its identity is the derived short id
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from sqlalchemy import Column, LargeBinary, String
from sqlmodel import Field, SQLModel


class LinkRecord(BaseModel):
    """
    Metadata for one short link.

    ``redirect_url`` is exposed as ``redirectUrl`` on the wire and in the
    persisted JSON.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = PydanticField(..., min_length=1)
    description: str = PydanticField(..., min_length=1)
    redirect_url: str = PydanticField(..., min_length=1, alias="redirectUrl")


class LinkEntry(SQLModel, table=True):
    """
    Key-value row of the link store.

    Fields:
    - key: the short id (primary key, so lookups hit the PK index)
    - value: canonical serialization of the LinkRecord
    """
    __tablename__ = "link_records"

    key: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), primary_key=True)
    )
    value: bytes = Field(sa_column=Column(LargeBinary, nullable=False))
