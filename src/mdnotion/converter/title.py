"""Page-title extraction from the first level-1 heading."""

from __future__ import annotations

from mdnotion.models import ExtractedTitle


def extract_title(markdown: str) -> ExtractedTitle:
    """Find the document's first ``# `` heading and lift it out as a title.

    Lines are scanned top to bottom for the first one whose stripped form
    starts with ``"# "`` (exactly one ``#`` followed by a space).  That
    line's text is removed from the body but its line break is kept, so
    every other line stays at its original position.  Later headings are
    left for the block builder.

    Parameters
    ----------
    markdown:
        The complete Markdown document.

    Returns
    -------
    ExtractedTitle
        ``title`` is the stripped heading text, or ``None`` when the
        document has no level-1 heading (``body`` is then *markdown*
        unchanged).

    Examples
    --------
    >>> extract_title("# Title\\nBody line")
    ExtractedTitle(title='Title', body='\\nBody line')
    """
    lines = markdown.split("\n")
    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            lines[index] = ""
            return ExtractedTitle(title=stripped[2:].strip(), body="\n".join(lines))
    return ExtractedTitle(title=None, body=markdown)
