"""mdnotion -- Markdown to Notion block conversion.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToNotionConverter`, :func:`build_blocks`,
  :func:`format_inline`, :func:`extract_title`, :func:`blocks_to_notion`
* **Limits:** :func:`chunk_text`, :func:`batch_blocks`
* **Upload:** :class:`NotionUploader`
* **Configuration:** :class:`MdNotionConfig`
* **Errors:** every :class:`MdNotionError` subclass and :class:`ErrorCode`
* **Models:** the :data:`Block` variants, :class:`RichSpan` and result types

Usage::

    from mdnotion import MarkdownToNotionConverter, MdNotionConfig

    result = MarkdownToNotionConverter(MdNotionConfig()).convert(
        "# Title\\n\\nSome **bold** text",
    )
    result.title        # 'Title'
    result.batches      # [[Paragraph(...)]]
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from mdnotion.config import MdNotionConfig

# ── Conversion ──────────────────────────────────────────────────────────
from mdnotion.converter import (
    MarkdownToNotionConverter,
    blocks_to_notion,
    build_blocks,
    extract_title,
    format_inline,
)

# ── Errors ──────────────────────────────────────────────────────────────
from mdnotion.errors import (
    ErrorCode,
    MdNotionAPIError,
    MdNotionAuthError,
    MdNotionError,
    MdNotionNetworkError,
    MdNotionNotFoundError,
    MdNotionPermissionError,
    MdNotionRateLimitError,
    MdNotionValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from mdnotion.models import (
    Block,
    BulletItem,
    CodeBlock,
    ConversionResult,
    Divider,
    ExtractedTitle,
    Heading,
    NumberItem,
    PageCreateResult,
    Paragraph,
    Quote,
    RichSpan,
    Table,
)

# ── Upload ──────────────────────────────────────────────────────────────
from mdnotion.uploader import NotionUploader
from mdnotion.utils import batch_blocks, chunk_text

__all__ = [
    # Configuration
    "MdNotionConfig",
    # Conversion
    "MarkdownToNotionConverter",
    "blocks_to_notion",
    "build_blocks",
    "extract_title",
    "format_inline",
    "chunk_text",
    "batch_blocks",
    # Upload
    "NotionUploader",
    # Errors
    "MdNotionError",
    "ErrorCode",
    "MdNotionValidationError",
    "MdNotionAuthError",
    "MdNotionPermissionError",
    "MdNotionNotFoundError",
    "MdNotionRateLimitError",
    "MdNotionAPIError",
    "MdNotionNetworkError",
    # Models
    "Block",
    "Heading",
    "Paragraph",
    "BulletItem",
    "NumberItem",
    "CodeBlock",
    "Quote",
    "Table",
    "Divider",
    "RichSpan",
    "ExtractedTitle",
    "ConversionResult",
    "PageCreateResult",
]
