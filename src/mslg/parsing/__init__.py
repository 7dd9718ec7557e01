"""
LG parsing components.

This package provides chunk splitting, the template parser, syntax
validators and the file loader.
"""

from mslg.parsing.chunker import split_into_chunks
from mslg.parsing.loader import parse_content, parse_file, parse_files, read_lg_file
from mslg.parsing.parser import (
    BodyState,
    ChunkType,
    LGParser,
    classify_chunk,
    parse_chunks,
)
from mslg.parsing.validation import validate_condition, validate_variation_item

__all__ = [
    "BodyState",
    "ChunkType",
    "LGParser",
    "classify_chunk",
    "parse_chunks",
    "parse_content",
    "parse_file",
    "parse_files",
    "read_lg_file",
    "split_into_chunks",
    "validate_condition",
    "validate_variation_item",
]
