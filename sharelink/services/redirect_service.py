"""
Redirect Page Service

This service prepares the share page served for a short id: the page carries
Open Graph / Twitter meta tags for link previews and immediately redirects
the visitor to the stored URL.

Design Decisions:
- Separate from LinkService: lookup is core logic, page context is plumbing
- The image URL is absolute so crawlers can fetch it
"""

from typing import Any

from sharelink.services.link_service import LinkService


class RedirectService:
    """
    Service for building redirect page contexts.
    """

    def __init__(self, link_service: LinkService, image_url: str):
        """
        Args:
            link_service: Service used to look up short ids
            image_url: Absolute URL of the share image
        """
        self.link_service = link_service
        self.image_url = image_url

    async def get_page_context(self, short_id: str, page_url: str) -> dict[str, Any]:
        """
        Look up ``short_id`` and return the template context for its page.

        Raises:
            LinkNotFoundError: nothing stored under the id
            CorruptRecordError: stored value is unreadable
            StoreError: if the read fails
        """
        record = await self.link_service.get_link(short_id)
        return {
            "title": record.title,
            "description": record.description,
            "redirect_url": record.redirect_url,
            "image_url": self.image_url,
            "page_url": page_url,
            "short_link_key": short_id,
        }
