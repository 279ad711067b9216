"""Serialize :data:`~mdnotion.models.Block` values to Notion API block dicts.

A rich_text segment is emitted as::

    {
        "type": "text",
        "text": {"content": "hello"},
        "annotations": {"bold": true, "italic": false, "strikethrough": false,
                         "underline": false, "code": false, "color": "default"}
    }

The ``annotations`` object is only present when the span is bold or code.

Table blocks carry their rows inline as ``table_row`` children, each row
padded with empty cells to ``table_width``.  A cell longer than the text
limit becomes several rich_text segments, split at word boundaries.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from mdnotion.config import NOTION_TEXT_LIMIT
from mdnotion.models import (
    Block,
    BulletItem,
    CodeBlock,
    Divider,
    Heading,
    NumberItem,
    Paragraph,
    Quote,
    RichSpan,
    Table,
)
from mdnotion.utils.text_split import chunk_text

# ---------------------------------------------------------------------------
# Notion code language mapping
# ---------------------------------------------------------------------------

# Notion API accepts a specific set of language identifiers.
_NOTION_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

_LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "sh": "shell",
    "zsh": "shell",
    "console": "shell",
    "rb": "ruby",
    "rs": "rust",
    "yml": "yaml",
    "md": "markdown",
    "cs": "c#",
    "cpp": "c++",
    "objc": "objective-c",
    "dockerfile": "docker",
    "make": "makefile",
    "tex": "latex",
    "htm": "html",
    "jsx": "javascript",
    "tsx": "typescript",
    "jsonc": "json",
    "csharp": "c#",
    "golang": "go",
    "kt": "kotlin",
    "ps1": "powershell",
    "text": "plain text",
    "txt": "plain text",
    "plaintext": "plain text",
}


def normalize_language(info: str | None) -> str:
    """Map a code fence info string to a Notion-accepted language name."""
    if not info:
        return "plain text"
    lang = info.strip().lower()
    if lang in _NOTION_LANGUAGES:
        return lang
    # Extra words after the language (e.g. "python title=x.py")
    lang = lang.split()[0] if lang else "plain text"
    if lang in _NOTION_LANGUAGES:
        return lang
    if lang in _LANGUAGE_ALIASES:
        return _LANGUAGE_ALIASES[lang]
    # Strip trailing digits (e.g. "python3" -> "python")
    stripped = re.sub(r"\d+$", "", lang)
    if stripped in _NOTION_LANGUAGES:
        return stripped
    if stripped in _LANGUAGE_ALIASES:
        return _LANGUAGE_ALIASES[stripped]
    return "plain text"


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

def _annotations(bold: bool, code: bool) -> dict[str, Any]:
    return {
        "bold": bold,
        "italic": False,
        "strikethrough": False,
        "underline": False,
        "code": code,
        "color": "default",
    }


def span_to_rich_text(span: RichSpan) -> dict[str, Any]:
    """Build a single Notion rich_text segment from a :class:`RichSpan`."""
    seg: dict[str, Any] = {
        "type": "text",
        "text": {"content": span.content},
    }
    if span.bold or span.code:
        seg["annotations"] = _annotations(span.bold, span.code)
    return seg


def spans_to_rich_text(spans: Iterable[RichSpan]) -> list[dict[str, Any]]:
    return [span_to_rich_text(span) for span in spans]


def _plain(content: str) -> list[dict[str, Any]]:
    if not content:
        return []
    return [{"type": "text", "text": {"content": content}}]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

def _text_block(block_type: str, spans: Iterable[RichSpan]) -> dict[str, Any]:
    return {
        "object": "block",
        "type": block_type,
        block_type: {
            "rich_text": spans_to_rich_text(spans),
            "color": "default",
        },
    }


def _heading(block: Heading) -> dict[str, Any]:
    payload = _text_block(block.notion_type, block.text)
    payload[block.notion_type]["is_toggleable"] = False
    return payload


def _paragraph(block: Paragraph) -> dict[str, Any]:
    return _text_block("paragraph", block.text)


def _bullet(block: BulletItem) -> dict[str, Any]:
    return _text_block("bulleted_list_item", block.text)


def _numbered(block: NumberItem) -> dict[str, Any]:
    return _text_block("numbered_list_item", block.text)


def _quote(block: Quote) -> dict[str, Any]:
    return _text_block("quote", block.text)


def _code(block: CodeBlock) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "code",
        "code": {
            "rich_text": _plain(block.content),
            "language": normalize_language(block.language),
            "caption": [],
        },
    }


def _divider(block: Divider) -> dict[str, Any]:
    return {"object": "block", "type": "divider", "divider": {}}


def _cell(content: str, max_text_length: int) -> list[dict[str, Any]]:
    return [
        {"type": "text", "text": {"content": piece}}
        for piece in chunk_text(content, max_text_length)
        if piece
    ]


def _table(block: Table, max_text_length: int = NOTION_TEXT_LIMIT) -> dict[str, Any]:
    width = block.width
    rows: list[dict[str, Any]] = []
    for row in block.rows:
        cells = [_cell(cell, max_text_length) for cell in row]
        cells.extend([] for _ in range(width - len(cells)))
        rows.append({
            "type": "table_row",
            "table_row": {"cells": cells},
        })
    return {
        "object": "block",
        "type": "table",
        "table": {
            "table_width": width,
            "has_column_header": block.has_column_header,
            "has_row_header": False,
            "children": rows,
        },
    }


_Serializer = Callable[[Any], dict[str, Any]]

_SERIALIZERS: dict[type, _Serializer] = {
    Heading: _heading,
    Paragraph: _paragraph,
    BulletItem: _bullet,
    NumberItem: _numbered,
    CodeBlock: _code,
    Quote: _quote,
    Divider: _divider,
}


def block_to_notion(block: Block, max_text_length: int = NOTION_TEXT_LIMIT) -> dict[str, Any]:
    """Serialize one block to the Notion API ``block`` object shape.

    *max_text_length* bounds each table cell segment; other variants are
    already chunked by the block builder.

    Raises
    ------
    TypeError
        If *block* is not one of the :data:`~mdnotion.models.Block` variants.
    """
    if isinstance(block, Table):
        return _table(block, max_text_length)
    serializer = _SERIALIZERS.get(type(block))
    if serializer is None:
        raise TypeError(f"Unsupported block variant: {type(block).__name__}")
    return serializer(block)


def blocks_to_notion(
    blocks: Iterable[Block],
    max_text_length: int = NOTION_TEXT_LIMIT,
) -> list[dict[str, Any]]:
    """Serialize a block sequence, preserving order."""
    return [block_to_notion(block, max_text_length) for block in blocks]
