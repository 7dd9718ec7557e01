"""
Core type definitions for the MSLG framework.

This module contains the type aliases shared between the parser, the loader
and error reporting.
"""

Chunk = str

ChunkList = list[Chunk]

# {"errCode": ..., "text": ...} as produced by LGError.to_dict
ErrorReport = dict[str, str]
