"""Inline span analysis: Markdown text to :class:`RichSpan` runs.

Only two inline constructs are recognised:

* **Inline code** -- text between a pair of backticks.  Extracted first and
  kept verbatim; nothing inside a code span is formatted further.
* **Bold** -- ``**text**`` or ``__text__`` in the non-code stretches.

Everything else is plain text.  Concatenating the ``content`` of the
returned spans reproduces the input with only the delimiter characters
removed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from mdnotion.models import RichSpan
from mdnotion.utils.text_split import chunk_text

# Non-greedy; the first delimiter pair that closes wins.
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")


def format_inline(text: str) -> list[RichSpan]:
    """Convert a flat Markdown string into a list of rich-text spans.

    Parameters
    ----------
    text:
        A single line (or chunk) of Markdown text.

    Returns
    -------
    list[RichSpan]
        Spans in source order.  Empty stretches produce no span, so an
        empty input yields an empty list.

    Examples
    --------
    >>> format_inline("Some **bold** and `code`")  # doctest: +NORMALIZE_WHITESPACE
    [RichSpan(content='Some ', bold=False, code=False),
     RichSpan(content='bold', bold=True, code=False),
     RichSpan(content=' and ', bold=False, code=False),
     RichSpan(content='code', bold=False, code=True)]
    """
    spans: list[RichSpan] = []
    for index, segment in enumerate(text.split("`")):
        if index % 2 == 1:
            if segment:
                spans.append(RichSpan(segment, code=True))
        else:
            spans.extend(_format_bold(segment))
    return spans


def _format_bold(segment: str) -> list[RichSpan]:
    """Split a code-free segment into plain and bold spans."""
    spans: list[RichSpan] = []
    last = 0
    for match in _BOLD_RE.finditer(segment):
        if match.start() > last:
            spans.append(RichSpan(segment[last : match.start()]))
        inner = match.group(1) if match.group(1) is not None else match.group(2)
        spans.append(RichSpan(inner, bold=True))
        last = match.end()
    if last < len(segment):
        spans.append(RichSpan(segment[last:]))
    return spans


def split_spans(spans: Iterable[RichSpan], max_length: int = 2000) -> list[RichSpan]:
    """Re-chunk any span whose content exceeds *max_length*.

    Each oversized span is split with :func:`chunk_text` and every piece
    keeps the original annotations.  Spans within the limit pass through
    unchanged.

    Raises
    ------
    ValueError
        If *max_length* is less than 1.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be >= 1, got {max_length}")

    output: list[RichSpan] = []
    for span in spans:
        if len(span.content) <= max_length:
            output.append(span)
            continue
        for piece in chunk_text(span.content, max_length):
            output.append(RichSpan(piece, bold=span.bold, code=span.code))
    return output
