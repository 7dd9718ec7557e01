"""
Core MSLG components.

This package provides the grammar markers and type aliases shared by the
parsing and translation packages.
"""

from mslg.core import markers
from mslg.core.types import Chunk, ChunkList, ErrorReport

__all__ = [
    "markers",
    "Chunk",
    "ChunkList",
    "ErrorReport",
]
