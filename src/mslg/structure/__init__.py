"""
LG object model.

This package provides the data structures populated by the parser.
"""

from mslg.structure.objects import (
    ConditionalResponse,
    Entity,
    EntityAttribute,
    EntityType,
    LGModel,
    ParseResult,
    Template,
)

__all__ = [
    "ConditionalResponse",
    "Entity",
    "EntityAttribute",
    "EntityType",
    "LGModel",
    "ParseResult",
    "Template",
]
