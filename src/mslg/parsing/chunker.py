"""
Chunk splitting for raw LG file content.

The parser consumes chunks: one logical block per template, entity
definition or file reference. This module produces them from file text.
"""

from mslg.core import markers
from mslg.core.types import ChunkList


def split_into_chunks(content: str) -> ChunkList:
    """
    Split LG file content into parser chunks.

    Blank lines and comment lines are dropped. Every line starting with a
    chunk marker (``#``, ``$`` or ``[``) begins a new chunk; other lines are
    appended to the current chunk. Lines before the first marker form a
    chunk of their own, which the parser reports as unrecognized input.

    Params:
        content: Raw LG file text

    Returns:
        List of chunk texts, lines joined with ``\\n``
    """
    if not content or not content.strip():
        return []

    chunks: list[list[str]] = []
    current: list[str] | None = None

    for raw_line in markers.LINE_SPLIT_PATTERN.split(content):
        line = raw_line.strip()
        if not line or line.startswith(markers.COMMENT):
            continue

        if line.startswith(markers.CHUNK_MARKERS) or current is None:
            current = [line]
            chunks.append(current)
        else:
            current.append(raw_line.rstrip())

    return ["\n".join(chunk_lines) for chunk_lines in chunks]
