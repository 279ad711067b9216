"""Word-bounded string chunking.

Notion's ``rich_text[].text.content`` field is limited to 2 000 characters.
:func:`chunk_text` partitions an over-long string into chunks that each hold
**at most** *max_length* characters, breaking only at single spaces so that
words are never cut.  A single word that is longer than the limit on its
own is kept whole and becomes an oversized chunk.
"""

from __future__ import annotations


def chunk_text(text: str, max_length: int = 2000) -> list[str]:
    """Split *text* into space-joined word chunks of at most *max_length*.

    Text that already fits is returned unchanged as a one-element list.
    Otherwise the text is split on single spaces and the words are packed
    greedily: a new chunk is started only when appending the next word
    (plus its joining space) would exceed *max_length*.  Runs of spaces
    collapse to a single space in the output.

    Parameters
    ----------
    text:
        The input string to partition.
    max_length:
        Maximum number of characters per chunk.  Defaults to **2000**
        (the Notion ``rich_text.text.content`` limit).

    Returns
    -------
    list[str]
        The chunks in order.  Joining them with single spaces reproduces
        *text* with consecutive spaces normalized.

    Raises
    ------
    ValueError
        If *max_length* is less than 1.

    Examples
    --------
    >>> chunk_text("hello world", 20)
    ['hello world']

    >>> chunk_text("alpha beta gamma", 10)
    ['alpha beta', 'gamma']

    >>> chunk_text("tiny enormousword", 5)
    ['tiny', 'enormousword']
    """
    if max_length < 1:
        raise ValueError(f"max_length must be >= 1, got {max_length}")

    if len(text) <= max_length:
        return [text]

    chunks: list[str] = []
    current = ""
    for word in text.split(" "):
        if not word:
            continue
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_length:
            current = f"{current} {word}"
        else:
            chunks.append(current)
            current = word

    if current:
        chunks.append(current)
    return chunks
