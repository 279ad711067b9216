"""Configuration for mdnotion.

:class:`MdNotionConfig` is a dataclass that captures every tuneable knob:
the Notion connection settings used by the upload layer and the two size
limits enforced by the converter.  The same instance is shared by
:class:`~mdnotion.converter.md_to_notion.MarkdownToNotionConverter` and
:class:`~mdnotion.uploader.NotionUploader`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

NOTION_TEXT_LIMIT = 2000
"""Maximum characters in one Notion ``rich_text`` content string."""

NOTION_CHILDREN_LIMIT = 100
"""Maximum blocks accepted by one Notion write request."""


@dataclass
class MdNotionConfig:
    """Complete configuration for mdnotion.

    Every parameter has a sensible default.  ``token`` is only needed when
    uploading; pure conversion works without it.

    Parameters
    ----------
    token:
        Notion integration token.  Never logged.
    notion_version:
        Value of the ``Notion-Version`` header sent with every request.
    base_url:
        API root URL.  Override for proxy or testing environments.
    max_text_length:
        Maximum characters per emitted text chunk.  Longer paragraphs,
        quotes and code bodies are split at word boundaries into several
        blocks.
    max_blocks_per_batch:
        Maximum blocks sent in one page-create or append request.
    title_from_h1:
        Lift the first ``# `` heading out of the body and use it as the
        page title.
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~mdnotion.observability.MetricsHook` backend.
    debug_dump_payload:
        Write the (redacted) Notion API request and response bodies to
        *stderr*.
    """

    # ── Core ────────────────────────────────────────────────────────────
    token: str = ""

    notion_version: str = "2022-06-28"

    base_url: str = "https://api.notion.com/v1"

    # ── Conversion limits ───────────────────────────────────────────────
    max_text_length: int = NOTION_TEXT_LIMIT

    max_blocks_per_batch: int = NOTION_CHILDREN_LIMIT

    title_from_h1: bool = True

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing."
            )

        if self.max_text_length < 1:
            raise ValueError(f"max_text_length must be >= 1, got {self.max_text_length}")
        if self.max_blocks_per_batch < 1:
            raise ValueError(
                f"max_blocks_per_batch must be >= 1, got {self.max_blocks_per_batch}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"MdNotionConfig({', '.join(parts)})"
