"""
MSLG exception classes.

This package provides all exception types used throughout the LG parser and
translation tooling for consistent error handling and reporting.
"""

from mslg.exceptions.core import (
    EmptyTemplateError,
    ErrorCode,
    ErrorContext,
    InvalidConditionError,
    InvalidEntityDefinitionError,
    InvalidFileReferenceError,
    InvalidVariationError,
    LGError,
    MissingListDecorationError,
    TranslationServiceError,
    UnrecognizedChunkError,
)

__all__ = [
    "LGError",
    "ErrorCode",
    "ErrorContext",
    "EmptyTemplateError",
    "InvalidConditionError",
    "InvalidEntityDefinitionError",
    "InvalidFileReferenceError",
    "InvalidVariationError",
    "MissingListDecorationError",
    "TranslationServiceError",
    "UnrecognizedChunkError",
]
