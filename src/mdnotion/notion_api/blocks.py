"""Block API wrapper for the Notion API."""

from __future__ import annotations

from typing import Any

from .transport import NotionTransport


class BlockAPI:
    """Synchronous wrapper for ``PATCH /blocks/{id}/children``.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    """

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def append_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Append child blocks to the end of a page or block.

        Parameters
        ----------
        block_id:
            The UUID of the parent block (or page).
        children:
            Serialized blocks, at most 100.  Use
            :func:`mdnotion.utils.batch_blocks` for longer sequences.

        Returns
        -------
        dict
            The API response containing the appended block objects.
        """
        return self._transport.request(
            "PATCH", f"/blocks/{block_id}/children", json={"children": children}
        )
