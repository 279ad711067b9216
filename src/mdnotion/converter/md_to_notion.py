"""Full Markdown-to-Notion conversion pipeline.

:class:`MarkdownToNotionConverter` runs three stages:

1. **Title** -- :func:`extract_title` lifts the first ``# `` heading out of
   the document (when ``title_from_h1`` is enabled).
2. **Build** -- :func:`build_blocks` turns the remaining body into blocks,
   splitting text at ``max_text_length``.
3. **Batch** -- :func:`batch_blocks` groups the blocks into write-sized
   batches of ``max_blocks_per_batch``.

The result is a :class:`ConversionResult` holding the title, the blocks and
the batches.  No I/O happens here.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter

from mdnotion.config import MdNotionConfig
from mdnotion.converter.block_builder import build_blocks
from mdnotion.converter.notion_payload import blocks_to_notion
from mdnotion.converter.title import extract_title
from mdnotion.models import ConversionResult
from mdnotion.observability import NoopMetricsHook, fields, get_logger
from mdnotion.utils.chunk import batch_blocks

log = get_logger("mdnotion.converter")


class MarkdownToNotionConverter:
    """Convert Markdown text to Notion blocks.

    Parameters
    ----------
    config:
        Configuration supplying the text and batch limits.

    Examples
    --------
    >>> converter = MarkdownToNotionConverter(MdNotionConfig())
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> result.title
    'Hello'
    >>> [type(b).__name__ for b in result.blocks]
    ['Paragraph']
    """

    def __init__(self, config: MdNotionConfig) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: extract title -> build blocks -> batch.

        Parameters
        ----------
        markdown:
            Raw Markdown text to convert.

        Returns
        -------
        ConversionResult
        """
        t0 = time.monotonic()

        title: str | None = None
        body = markdown
        if self._config.title_from_h1:
            extracted = extract_title(markdown)
            title, body = extracted.title, extracted.body

        blocks = build_blocks(body, self._config.max_text_length)
        batches = batch_blocks(blocks, self._config.max_blocks_per_batch)

        elapsed_ms = (time.monotonic() - t0) * 1000
        counts = Counter(block.block_type for block in blocks)
        for block_type, count in counts.items():
            self._metrics.increment(
                "mdnotion.blocks_converted_total",
                count,
                tags={"block_type": block_type},
            )
        self._metrics.timing("mdnotion.conversion_duration_ms", elapsed_ms)

        log.debug(
            "markdown converted",
            extra=fields(
                op="convert",
                title=title,
                blocks=len(blocks),
                batches=len(batches),
                block_types=dict(counts),
            ),
        )

        if self._config.debug_dump_payload:
            print(
                "[mdnotion] Notion blocks payload:",
                json.dumps(
                    blocks_to_notion(blocks, self._config.max_text_length),
                    indent=2,
                    ensure_ascii=False,
                ),
                file=sys.stderr,
            )

        return ConversionResult(title=title, blocks=blocks, batches=batches)
