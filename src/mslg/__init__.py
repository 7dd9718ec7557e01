"""
MSLG - Parser and translation tooling for language generation (.lg) files

MSLG parses LG template files into an object model of templates, variations,
conditional responses and entities, and localizes LG files through machine
translation.
"""

from importlib.metadata import version

from mslg.exceptions import ErrorCode, LGError
from mslg.parsing import parse_chunks, parse_content, parse_file
from mslg.structure import (
    ConditionalResponse,
    Entity,
    EntityType,
    ParseResult,
    Template,
)

__version__ = version("mslg")

__all__ = [
    "__version__",
    "ConditionalResponse",
    "Entity",
    "EntityType",
    "ErrorCode",
    "LGError",
    "ParseResult",
    "Template",
    "parse_chunks",
    "parse_content",
    "parse_file",
]
