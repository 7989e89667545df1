"""
FastAPI Endpoints for the Short Link Service

This module defines the REST endpoints with minimal logic.
Endpoints only handle:
- Request parsing (Pydantic models)
- Error handling and HTTP responses
- Delegating to the service layer

Routes:
- POST /            create a short link, returns {"id": ...}
- GET  /{short_id}  share page with meta tags that redirects to the stored URL
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from sharelink.api.schemas import CreateLinkRequest, CreateLinkResponse
from sharelink.core.exceptions import (
    CorruptRecordError,
    InvalidInputError,
    LinkNotFoundError,
    StoreError,
)
from sharelink.core.setting import BASE_DIR, settings
from sharelink.core.store_manager import get_link_store
from sharelink.core.validators import sanitize_short_id
from sharelink.services.link_service import LinkService
from sharelink.services.link_store import LinkStore
from sharelink.services.redirect_service import RedirectService

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def get_link_service(store: LinkStore = Depends(get_link_store)) -> LinkService:
    return LinkService(store, id_length=settings.SHORT_ID_LENGTH)


@router.post(
    "/",
    response_model=CreateLinkResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a short link",
    description="Stores title, description and redirect URL and returns the derived short id"
)
async def create_short_link(
    body: CreateLinkRequest,
    link_service: LinkService = Depends(get_link_service)
) -> CreateLinkResponse:
    """
    Create (or re-create) a short link.

    Raises:
        HTTPException 400: If a required field is missing or empty
        HTTPException 500: If the store write fails
    """
    try:
        short_id = await link_service.create_link(body.model_dump())
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return CreateLinkResponse(id=short_id)


@router.get(
    "/{short_id}",
    response_class=HTMLResponse,
    summary="Share page for a short link",
    description="HTML page with social media meta tags that redirects to the stored URL"
)
async def redirect_page(
    short_id: str,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
) -> HTMLResponse:
    """
    Render the share page for a short id.

    Raises:
        HTTPException 404: If nothing is stored under the id
        HTTPException 500: If the stored record is corrupt or the read fails
    """
    sanitized_id = sanitize_short_id(short_id)
    if not sanitized_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short link '{short_id}' not found"
        )

    image_url = str(request.url_for("static", path=settings.IMAGE_NAME))
    redirect_service = RedirectService(link_service, image_url=image_url)

    try:
        context = await redirect_service.get_page_context(sanitized_id, page_url=str(request.url))
    except LinkNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except (CorruptRecordError, StoreError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return templates.TemplateResponse(request, "redirect.html", context)
