"""Convert Markdown text to a flat list of :data:`~mdnotion.models.Block` values.

The builder is a single forward pass over the document's lines with a
one-line lookahead (used only to skip table separators and to decide when a
table ends).  Each line is classified in priority order:

- code fence toggle (three backticks) -> code blocks, content kept literal
- ``>`` lines -> accumulated into one quote block
- ``| ... |`` lines -> table rows (separator lines are consumed)
- ``#`` headings -> heading_1/2/3 (level 3+ collapses to heading_3)
- ``-``/``*``/``+`` and ``1.`` items -> buffered list run (a bare marker emits nothing)
- ``---`` / ``***`` / ``___`` -> divider
- blank line -> ends the pending list run
- anything else -> one paragraph per line

The builder never raises on malformed Markdown; anything it cannot place
falls through to the paragraph rule.
"""

from __future__ import annotations

import re
from enum import Enum

from mdnotion.converter.inline import format_inline, split_spans
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

DEFAULT_CODE_LANGUAGE = "plain text"

_FENCE = "```"
_HEADING_RE = re.compile(r"^(#+)(?:\s+(.*))?$")
_BULLET_RE = re.compile(r"^[-*+] (.*)$")
_NUMBERED_RE = re.compile(r"^\d+\. (.*)$")
_BARE_MARKER_RE = re.compile(r"^(?:[-*+]|\d+\.)$")
_DIVIDER_RE = re.compile(r"^([-*_])\1{2,}$")
_SEPARATOR_RE = re.compile(r"^[\s|:-]+$")


class _Mode(str, Enum):
    NORMAL = "normal"
    CODE = "code"
    QUOTE = "quote"
    TABLE = "table"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_blocks(markdown: str, max_text_length: int = 2000) -> list[Block]:
    """Convert a Markdown document into an ordered list of blocks.

    Parameters
    ----------
    markdown:
        The document body.  ``\\r\\n`` and ``\\r`` line endings are
        normalised to ``\\n``.
    max_text_length:
        Maximum characters per emitted text chunk.  Paragraph, quote and
        code text longer than this is split into several blocks at word
        boundaries; heading and list-item spans are split in place.

    Returns
    -------
    list[Block]
        Blocks in source order.

    Raises
    ------
    ValueError
        If *max_text_length* is less than 1.
    """
    if max_text_length < 1:
        raise ValueError(f"max_text_length must be >= 1, got {max_text_length}")

    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    return _LineParser(max_text_length).parse(text.split("\n"))


# ---------------------------------------------------------------------------
# Line predicates
# ---------------------------------------------------------------------------

def _is_table_row(stripped: str) -> bool:
    return len(stripped) > 1 and stripped.startswith("|") and stripped.endswith("|")


def _is_separator(stripped: str) -> bool:
    """``|---|:--:|`` style header separator."""
    return (
        "|" in stripped
        and "-" in stripped
        and _SEPARATOR_RE.match(stripped) is not None
    )


def _split_cells(stripped: str) -> tuple[str, ...]:
    # Drop the enclosing pipes, keep empty interior cells.
    return tuple(cell.strip() for cell in stripped[1:-1].split("|"))


def _strip_blank_lines(lines: list[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])


# ---------------------------------------------------------------------------
# Parser state
# ---------------------------------------------------------------------------

class _LineParser:
    """Mutable state for one conversion call."""

    __slots__ = (
        "blocks",
        "buffer",
        "code_language",
        "max_text_length",
        "mode",
        "pending_items",
        "table_rows",
    )

    def __init__(self, max_text_length: int) -> None:
        self.max_text_length = max_text_length
        self.blocks: list[Block] = []
        self.mode = _Mode.NORMAL
        self.pending_items: list[Block] = []
        self.buffer: list[str] = []
        self.code_language = DEFAULT_CODE_LANGUAGE
        self.table_rows: list[tuple[str, ...]] = []

    def parse(self, lines: list[str]) -> list[Block]:
        index = 0
        while index < len(lines):
            index = self._process_line(lines, index) + 1
        self._finish()
        return self.blocks

    # -- dispatch ------------------------------------------------------------

    def _process_line(self, lines: list[str], index: int) -> int:
        """Handle ``lines[index]`` and return the index of the last line consumed."""
        line = lines[index]
        stripped = line.strip()

        if self.mode is _Mode.CODE:
            if stripped.startswith(_FENCE):
                self._close_fence()
            else:
                self.buffer.append(line)
            return index

        if self.mode is _Mode.QUOTE:
            if stripped.startswith(">"):
                self._append_quote_line(stripped)
                return index
            self._flush_quote()

        if stripped.startswith(_FENCE):
            self._flush_list()
            self._open_fence(stripped)
            return index

        if stripped.startswith(">"):
            self._flush_list()
            self.mode = _Mode.QUOTE
            self._append_quote_line(stripped)
            return index

        if _is_table_row(stripped):
            return self._table_row(lines, index)

        heading = _HEADING_RE.match(stripped)
        if heading:
            self._flush_list()
            text = (heading.group(2) or "").strip()
            if text:
                level = min(len(heading.group(1)), 3)
                self.blocks.append(Heading(level, self._spans(text)))
            return index

        bullet = _BULLET_RE.match(stripped)
        if bullet:
            text = bullet.group(1).strip()
            if text:
                self.pending_items.append(BulletItem(self._spans(text)))
            return index

        numbered = _NUMBERED_RE.match(stripped)
        if numbered:
            text = numbered.group(1).strip()
            if text:
                self.pending_items.append(NumberItem(self._spans(text)))
            return index

        if _BARE_MARKER_RE.match(stripped):
            # Marker with no text after stripping.
            return index

        if _DIVIDER_RE.match(stripped):
            self._flush_list()
            self.blocks.append(Divider())
            return index

        self._flush_list()
        if stripped:
            self._emit_paragraph(stripped)
        return index

    def _finish(self) -> None:
        if self.mode is _Mode.CODE:
            # Unterminated fence: keep what was collected.
            self._close_fence()
        elif self.mode is _Mode.QUOTE:
            self._flush_quote()
        elif self.mode is _Mode.TABLE:
            self._flush_table()
        self._flush_list()

    # -- helpers -------------------------------------------------------------

    def _spans(self, text: str) -> tuple[RichSpan, ...]:
        return tuple(split_spans(format_inline(text), self.max_text_length))

    def _flush_list(self) -> None:
        if self.pending_items:
            self.blocks.extend(self.pending_items)
            self.pending_items = []

    def _emit_paragraph(self, text: str) -> None:
        for chunk in chunk_text(text, self.max_text_length):
            spans = format_inline(chunk)
            if spans:
                self.blocks.append(Paragraph(tuple(spans)))

    # -- code fences ---------------------------------------------------------

    def _open_fence(self, stripped: str) -> None:
        self.mode = _Mode.CODE
        self.code_language = stripped.lstrip("`").strip() or DEFAULT_CODE_LANGUAGE
        self.buffer = []

    def _close_fence(self) -> None:
        content = _strip_blank_lines(self.buffer)
        for chunk in chunk_text(content, self.max_text_length):
            self.blocks.append(CodeBlock(self.code_language, chunk))
        self.buffer = []
        self.code_language = DEFAULT_CODE_LANGUAGE
        self.mode = _Mode.NORMAL

    # -- block quotes --------------------------------------------------------

    def _append_quote_line(self, stripped: str) -> None:
        content = stripped[1:]
        if content.startswith(" "):
            content = content[1:]
        self.buffer.append(content + "\n")

    def _flush_quote(self) -> None:
        text = "".join(self.buffer).strip()
        self.buffer = []
        self.mode = _Mode.NORMAL
        if not text:
            return
        for chunk in chunk_text(text, self.max_text_length):
            spans = format_inline(chunk)
            if spans:
                self.blocks.append(Quote(tuple(spans)))

    # -- tables --------------------------------------------------------------

    def _table_row(self, lines: list[str], index: int) -> int:
        self._flush_list()
        self.mode = _Mode.TABLE

        stripped = lines[index].strip()
        if not _is_separator(stripped):
            self.table_rows.append(_split_cells(stripped))

        if index + 1 < len(lines) and _is_separator(lines[index + 1].strip()):
            index += 1

        if index + 1 >= len(lines) or not _is_table_row(lines[index + 1].strip()):
            self._flush_table()
        return index

    def _flush_table(self) -> None:
        # A header without data rows is dropped.
        if len(self.table_rows) >= 2:
            self.blocks.append(Table(rows=tuple(self.table_rows)))
        self.table_rows = []
        self.mode = _Mode.NORMAL
