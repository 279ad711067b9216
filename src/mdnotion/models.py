"""Public data models for mdnotion.

The conversion engine produces a flat sequence of :data:`Block` values.
``Block`` is a closed union of frozen dataclasses, one per Notion block kind
the converter can emit; each variant carries its Notion ``type`` tag in the
class-level ``block_type`` attribute.  Text-bearing variants hold a tuple of
:class:`RichSpan` runs.

All types are plain dataclasses with no behaviour beyond what is needed for
structural equality and hashing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# Inline text
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RichSpan:
    """A run of text carrying uniform formatting.

    A span is never both ``bold`` and ``code``: inline code is extracted
    first and treated as opaque.

    Attributes
    ----------
    content:
        The text of the run, with Markdown delimiters removed.
    bold:
        ``True`` for text that was wrapped in ``**`` or ``__``.
    code:
        ``True`` for text that was wrapped in backticks.
    """

    content: str
    bold: bool = False
    code: bool = False


# ---------------------------------------------------------------------------
# Block variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Heading:
    """``heading_1`` / ``heading_2`` / ``heading_3``.  *level* is 1-3."""

    level: int
    text: tuple[RichSpan, ...]

    block_type: ClassVar[str] = "heading"

    @property
    def notion_type(self) -> str:
        return f"heading_{self.level}"


@dataclass(frozen=True)
class Paragraph:
    text: tuple[RichSpan, ...]

    block_type: ClassVar[str] = "paragraph"


@dataclass(frozen=True)
class BulletItem:
    text: tuple[RichSpan, ...]

    block_type: ClassVar[str] = "bulleted_list_item"


@dataclass(frozen=True)
class NumberItem:
    text: tuple[RichSpan, ...]

    block_type: ClassVar[str] = "numbered_list_item"


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.  *content* is literal and never inline-formatted."""

    language: str
    content: str

    block_type: ClassVar[str] = "code"


@dataclass(frozen=True)
class Quote:
    text: tuple[RichSpan, ...]

    block_type: ClassVar[str] = "quote"


@dataclass(frozen=True)
class Table:
    """A pipe table.  The first row is the header row by convention."""

    rows: tuple[tuple[str, ...], ...]
    has_column_header: bool = True

    block_type: ClassVar[str] = "table"

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)


@dataclass(frozen=True)
class Divider:
    block_type: ClassVar[str] = "divider"


Block = Union[
    Heading,
    Paragraph,
    BulletItem,
    NumberItem,
    CodeBlock,
    Quote,
    Table,
    Divider,
]
"""One structural unit of a converted document."""


# ---------------------------------------------------------------------------
# Pipeline results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExtractedTitle:
    """Output of :func:`mdnotion.converter.title.extract_title`.

    Attributes
    ----------
    title:
        Text of the first ``# `` heading, or ``None`` if the document has
        none.
    body:
        The document with that heading line blanked out; every other line
        is preserved verbatim.
    """

    title: str | None
    body: str


@dataclass
class ConversionResult:
    """Output of :meth:`MarkdownToNotionConverter.convert`.

    Attributes
    ----------
    title:
        The page title taken from the first level-1 heading, if any.
    blocks:
        The converted body blocks, in document order.
    batches:
        *blocks* partitioned into transport-sized groups.
    """

    title: str | None = None
    blocks: list[Block] = field(default_factory=list)
    batches: list[list[Block]] = field(default_factory=list)


@dataclass
class PageCreateResult:
    """Result of :meth:`NotionUploader.upload_markdown`.

    Attributes
    ----------
    page_id:
        The ID of the newly created Notion page.
    url:
        The URL of the newly created page.
    title:
        The title the page was created with.
    blocks_created:
        Total number of blocks written to the page.
    batches_sent:
        Number of write requests used for the blocks (the page-create call
        plus every follow-up append).
    """

    page_id: str
    url: str
    title: str
    blocks_created: int
    batches_sent: int
