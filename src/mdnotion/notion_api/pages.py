"""Page API wrapper for the Notion API.

:class:`PageAPI` is a thin wrapper around ``POST /pages``; all HTTP concerns
live in the transport.
"""

from __future__ import annotations

from typing import Any

from mdnotion.config import NOTION_TEXT_LIMIT
from mdnotion.utils.text_split import chunk_text

from .transport import NotionTransport


def title_property(title: str, max_length: int = NOTION_TEXT_LIMIT) -> dict[str, Any]:
    """Build the ``properties`` payload for a page under another page.

    A title longer than *max_length* is split at word boundaries into
    several text segments; a single word that is still too long (a long
    file stem, say) is cut at *max_length*.
    """
    segments = [
        {"type": "text", "text": {"content": piece[start : start + max_length]}}
        for piece in chunk_text(title, max_length)
        for start in range(0, max(len(piece), 1), max_length)
    ]
    return {"title": {"title": segments}}


class PageAPI:
    """Synchronous wrapper for the Notion Pages API.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    """

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def create(
        self,
        parent_page_id: str,
        title: str,
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a new page under an existing page.

        Parameters
        ----------
        parent_page_id:
            The UUID of the parent page.
        title:
            Page title.
        children:
            Optional serialized blocks to create as page content.  Notion
            accepts at most 100 children per create call; append the rest
            with :meth:`BlockAPI.append_children`.

        Returns
        -------
        dict
            The created page object as returned by the Notion API.
        """
        body: dict[str, Any] = {
            "parent": {"type": "page_id", "page_id": parent_page_id},
            "properties": title_property(title),
        }
        if children:
            body["children"] = children
        return self._transport.request("POST", "/pages", json=body)
