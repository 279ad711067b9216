"""Batch a block sequence into groups of at most *size* items.

The Notion ``append_block_children`` endpoint (and the ``children`` array of
a page-create call) accepts a maximum of 100 blocks per request.  This helper
splits an arbitrarily long sequence into compliant batches so callers never
have to worry about the limit.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def batch_blocks(blocks: Sequence[T], size: int = 100) -> list[list[T]]:
    """Split *blocks* into contiguous batches of at most ``size``.

    The partition is order-preserving: concatenating the batches gives back
    the input exactly.  Works equally on :mod:`mdnotion.models` block
    objects and on serialized Notion block dicts.

    Parameters
    ----------
    blocks:
        The full sequence to partition.
    size:
        Maximum number of blocks per batch.  Defaults to **100** (the Notion
        API limit for ``append_block_children``).

    Returns
    -------
    list[list]
        Batches holding exactly *size* items except possibly the last.
        An empty input returns an empty list (not ``[[]]``).

    Raises
    ------
    ValueError
        If *size* is less than 1.

    Examples
    --------
    >>> batch_blocks(list(range(5)), size=2)
    [[0, 1], [2, 3], [4]]
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    if not blocks:
        return []

    return [list(blocks[i : i + size]) for i in range(0, len(blocks), size)]
