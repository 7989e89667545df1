"""
Link Store Manager

This module manages the process-wide link store handle.

Design:
- The store is opened once on application startup and closed on shutdown
- The handle lives on ``app.state``, not in a module global
- Endpoints receive it through the ``get_link_store`` dependency, so tests
  override one dependency to swap in an in-memory store
"""

import logging

from fastapi import FastAPI, Request

from sharelink.core.exceptions import ServiceUnavailableError
from sharelink.core.setting import Settings
from sharelink.services.link_store import LinkStore, SQLLinkStore

logger = logging.getLogger(__name__)


async def open_store(app: FastAPI, settings: Settings) -> LinkStore:
    """
    Open the link store configured by ``settings`` and attach it to ``app``.

    Raises:
        StoreError: if the store cannot be opened
    """
    existing = getattr(app.state, "link_store", None)
    if existing is not None:
        logger.warning("Link store already initialized")
        return existing

    store = await SQLLinkStore.open(settings.database_url())
    app.state.link_store = store
    logger.info(f"Link store ready at {settings.DB_PATH}")
    return store


async def close_store(app: FastAPI) -> None:
    """Close and detach the link store, if one is open."""
    store = getattr(app.state, "link_store", None)
    if store is None:
        return
    app.state.link_store = None
    await store.close()


def get_link_store(request: Request) -> LinkStore:
    """
    FastAPI dependency returning the application's link store.

    Raises:
        ServiceUnavailableError: if the store was never opened
    """
    store = getattr(request.app.state, "link_store", None)
    if store is None:
        raise ServiceUnavailableError("link store")
    return store
