"""Markdown -> Notion conversion pipeline.

Public API:

- :class:`MarkdownToNotionConverter` -- title, blocks and batches for a document.
- :func:`build_blocks` -- Markdown body to a list of blocks.
- :func:`format_inline` -- inline text to bold / code spans.
- :func:`extract_title` -- first level-1 heading as a page title.
- :func:`blocks_to_notion` -- blocks to Notion API dicts.
"""

from mdnotion.converter.block_builder import build_blocks
from mdnotion.converter.inline import format_inline, split_spans
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.converter.notion_payload import block_to_notion, blocks_to_notion
from mdnotion.converter.title import extract_title

__all__ = [
    "MarkdownToNotionConverter",
    "block_to_notion",
    "blocks_to_notion",
    "build_blocks",
    "extract_title",
    "format_inline",
    "split_spans",
]
