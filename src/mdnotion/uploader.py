"""Upload Markdown documents as Notion pages.

:class:`NotionUploader` creates one child page per document under an
existing parent page.  The first batch of blocks is sent with the
page-create call; the remaining batches are appended in order.

Usage::

    from mdnotion import MdNotionConfig, NotionUploader

    with NotionUploader(MdNotionConfig(token="secret_xxx")) as uploader:
        result = uploader.upload_file("<parent_page_id>", "docs/PRD.md")
        print(result.url)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from mdnotion.config import MdNotionConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.converter.notion_payload import blocks_to_notion
from mdnotion.errors import ErrorCode, MdNotionError
from mdnotion.models import PageCreateResult
from mdnotion.notion_api.blocks import BlockAPI
from mdnotion.notion_api.pages import PageAPI
from mdnotion.notion_api.transport import NotionTransport
from mdnotion.observability import NoopMetricsHook, fields, get_logger

log = get_logger("mdnotion.uploader")

DEFAULT_TITLE = "Untitled"


class NotionUploader:
    """Convert Markdown and write it to Notion.

    Parameters
    ----------
    config:
        Configuration with a valid ``token``.  The same limits drive the
        conversion and the request batching.
    """

    def __init__(self, config: MdNotionConfig) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._transport = NotionTransport(config)
        self._pages = PageAPI(self._transport)
        self._blocks = BlockAPI(self._transport)
        self._converter = MarkdownToNotionConverter(config)

    # ------------------------------------------------------------------
    # Single document
    # ------------------------------------------------------------------

    def upload_markdown(
        self,
        parent_page_id: str,
        markdown: str,
        fallback_title: str = DEFAULT_TITLE,
    ) -> PageCreateResult:
        """Create a page under *parent_page_id* from Markdown text.

        Parameters
        ----------
        parent_page_id:
            ID of the existing parent page.
        markdown:
            The document.  Its first ``# `` heading becomes the page title
            when ``title_from_h1`` is enabled.
        fallback_title:
            Title used when the document has no level-1 heading.

        Returns
        -------
        PageCreateResult

        Raises
        ------
        MdNotionError
            Any API failure; a failure while appending leaves the page
            created with the batches sent so far.
        """
        conversion = self._converter.convert(markdown)
        title = conversion.title or fallback_title
        batches = [
            blocks_to_notion(batch, self._config.max_text_length)
            for batch in conversion.batches
        ]

        page = self._pages.create(
            parent_page_id,
            title,
            children=batches[0] if batches else None,
        )
        page_id = page["id"]
        page_url = page.get("url", "")
        self._metrics.increment("mdnotion.pages_created_total")

        for number, batch in enumerate(batches[1:], start=2):
            self._blocks.append_children(page_id, batch)
            log.debug(
                "batch appended",
                extra=fields(
                    op="append_children",
                    page_id=page_id,
                    batch=number,
                    of=len(batches),
                    blocks=len(batch),
                ),
            )

        log.info(
            "page created",
            extra=fields(
                op="upload_markdown",
                page_id=page_id,
                title=title,
                blocks=len(conversion.blocks),
                batches=len(batches),
            ),
        )
        return PageCreateResult(
            page_id=page_id,
            url=page_url,
            title=title,
            blocks_created=len(conversion.blocks),
            batches_sent=max(len(batches), 1),
        )

    def upload_file(self, parent_page_id: str, path: str | Path) -> PageCreateResult:
        """Upload a Markdown file; the fallback title is the file stem.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        UnicodeDecodeError
            If the file is not valid UTF-8.
        MdNotionError
            Any API failure.
        """
        file_path = Path(path)
        markdown = file_path.read_text(encoding="utf-8")
        return self.upload_markdown(parent_page_id, markdown, fallback_title=file_path.stem)

    # ------------------------------------------------------------------
    # Many documents
    # ------------------------------------------------------------------

    def upload_documents(
        self,
        parent_page_id: str,
        paths: Iterable[str | Path],
    ) -> list[PageCreateResult]:
        """Upload several files, continuing past per-document failures.

        Missing or unreadable files (including text that is not valid
        UTF-8) are skipped with a warning; a document whose upload fails
        with an :class:`MdNotionError` is logged and the remaining
        documents are still processed.

        Returns
        -------
        list[PageCreateResult]
            Results for the documents that were uploaded, in input order.
        """
        results: list[PageCreateResult] = []
        for path in paths:
            file_path = Path(path)
            if not file_path.is_file():
                log.warning(
                    "document not found",
                    extra=fields(op="upload_documents", path=str(file_path)),
                )
                self._metrics.increment(
                    "mdnotion.upload_failure_total", tags={"reason": "not_found"},
                )
                continue
            try:
                results.append(self.upload_file(parent_page_id, file_path))
            except (OSError, UnicodeDecodeError) as exc:
                log.warning(
                    "document unreadable",
                    extra=fields(op="upload_documents", path=str(file_path), error=str(exc)),
                )
                self._metrics.increment(
                    "mdnotion.upload_failure_total", tags={"reason": "unreadable"},
                )
            except MdNotionError as exc:
                reason = exc.code.value if isinstance(exc.code, ErrorCode) else exc.code
                log.error(
                    "document upload failed",
                    extra=fields(
                        op="upload_documents",
                        path=str(file_path),
                        code=reason,
                        error=exc.message,
                    ),
                )
                self._metrics.increment(
                    "mdnotion.upload_failure_total", tags={"reason": reason},
                )
        return results

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._transport.close()

    def __enter__(self) -> NotionUploader:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
