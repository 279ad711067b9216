from .chunk import batch_blocks
from .redact import redact
from .text_split import chunk_text

__all__ = [
    "batch_blocks",
    "chunk_text",
    "redact",
]
