"""
API Request and Response Schemas

Pydantic models for the HTTP layer.

Request fields are untyped at the schema level: missing, empty or non-string
fields are reported by the service's validation gate (400 naming the field)
rather than as a generic 422.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateLinkRequest(BaseModel):
    """Request model for short link creation."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = Field(None, description="Share title, e.g. 'Tag: Item for 5 SWT'")
    description: Optional[Any] = Field(None, description="Share description")
    redirectUrl: Optional[Any] = Field(None, description="URL the short link redirects to")


class CreateLinkResponse(BaseModel):
    """Response model for short link creation."""
    id: str = Field(..., description="The derived short id")
