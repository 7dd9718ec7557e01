"""
Exception classes for LG template parsing and translation.

This module defines specific exception types for the error conditions that
can occur while splitting, parsing, validating and translating LG files.
Every exception carries an enumerated error code and the human-readable text
so callers can report both to the end user.
"""

from dataclasses import dataclass
from enum import Enum

from mslg.core.types import ErrorReport


class ErrorCode(Enum):
    """Enumerated error codes reported alongside every LG error."""

    NO_LIST_DECORATION_ON_VARIATION = "NO_LIST_DECORATION_ON_VARIATION"
    INVALID_TEMPLATE = "INVALID_TEMPLATE"
    INVALID_LG_FILE_REF = "INVALID_LG_FILE_REF"
    INVALID_ENTITY_DEFINITION = "INVALID_ENTITY_DEFINITION"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CONDITION = "INVALID_CONDITION"
    INVALID_VARIATION = "INVALID_VARIATION"
    TRANSLATE_SERVICE_FAIL = "TRANSLATE_SERVICE_FAIL"


@dataclass
class ErrorContext:
    """
    Location information for error messages.

    Captures where an error occurred in the LG source so that the message
    can point at the file, the chunk and the line inside that chunk.

    Params:
        source_file: Path of the LG file being parsed, if known
        chunk_index: Zero-based index of the chunk in the chunk list
        line_number: One-based line number within the chunk (header is line 1)
        line_text: The raw line that triggered the error
    """

    source_file: str | None = None
    chunk_index: int | None = None
    line_number: int | None = None
    line_text: str | None = None

    def format_location(self) -> str:
        """
        Format location information as indented lines.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []

        if self.source_file:
            lines.append(f"  in file {self.source_file}")

        if self.chunk_index is not None:
            if self.line_number is not None:
                lines.append(f"  at chunk {self.chunk_index}, line {self.line_number}")
            else:
                lines.append(f"  at chunk {self.chunk_index}")

        if self.line_text:
            lines.append(f"  line: {self.line_text}")

        return "\n".join(lines)


class LGError(Exception):
    """Base exception for all LG parsing and translation errors."""

    err_code: ErrorCode = ErrorCode.INVALID_INPUT

    def __init__(self, text: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            text: Human-readable error text
            context: Optional location information
        """
        self.text = text
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            location_info = self.context.format_location()
            if location_info:
                return f"{self.text}\n{location_info}"
        return self.text

    def with_context(self, context: ErrorContext) -> "LGError":
        """
        Attach location information after the error was raised.

        Fields already present on the existing context are kept.

        Params:
            context: Location information to merge in

        Returns:
            The same exception instance, for re-raising
        """
        if self.context is None:
            self.context = context
        else:
            self.context.source_file = self.context.source_file or context.source_file
            if self.context.chunk_index is None:
                self.context.chunk_index = context.chunk_index
            if self.context.line_number is None:
                self.context.line_number = context.line_number
            self.context.line_text = self.context.line_text or context.line_text
        self.args = (self._format_message(),)
        return self

    def to_dict(self) -> ErrorReport:
        """Return the error as an ``{errCode, text}`` mapping for reporting."""
        return {"errCode": self.err_code.value, "text": self.text}


class MissingListDecorationError(LGError):
    """Raised when a template body line is not prefixed with -, * or +."""

    err_code = ErrorCode.NO_LIST_DECORATION_ON_VARIATION

    def __init__(self, line: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            line: The offending template line
            context: Optional location information
        """
        self.line = line
        super().__init__(
            f'Template item: "{line}" does not have list decoration. '
            f'Prefix line with "-" or "+" or "*"',
            context,
        )


class EmptyTemplateError(LGError):
    """Raised when a template ends up with no variations and no conditions."""

    err_code = ErrorCode.INVALID_TEMPLATE

    def __init__(self, template_name: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            template_name: Name of the offending template
            reason: Specific error message, defaults to the empty-template text
        """
        self.template_name = template_name
        super().__init__(
            reason
            or f'Template "{template_name}" does not have any variations '
            f"or conditional response definition"
        )


class InvalidFileReferenceError(LGError):
    """Raised when a file reference has no usable link target."""

    err_code = ErrorCode.INVALID_LG_FILE_REF

    def __init__(self, reference: str, reason: str = "Invalid LG file reference"):
        """
        Initialize the exception.

        Params:
            reference: The reference line or path that failed
            reason: Why the reference is invalid
        """
        self.reference = reference
        super().__init__(f"{reason}: {reference}")


class InvalidEntityDefinitionError(LGError):
    """Raised when an entity definition line is malformed."""

    err_code = ErrorCode.INVALID_ENTITY_DEFINITION

    def __init__(self, definition: str):
        """
        Initialize the exception.

        Params:
            definition: The malformed entity definition line
        """
        self.definition = definition
        super().__init__(f'Invalid entity definition for "{definition}"')


class UnrecognizedChunkError(LGError):
    """Raised when input does not match any recognized LG construct."""

    err_code = ErrorCode.INVALID_INPUT

    def __init__(self, chunk: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            chunk: The offending chunk or line text
            reason: Specific error message, defaults to the unidentified-definition text
        """
        self.chunk = chunk
        message = reason or (
            "Unidentified template definition. "
            "Template definition must start with # <Template Name>"
        )
        super().__init__(f"{message}\n{chunk}")


class InvalidConditionError(LGError):
    """Raised when a conditional response expression is malformed."""

    err_code = ErrorCode.INVALID_CONDITION

    def __init__(self, condition: str, reason: str):
        """
        Initialize the exception.

        Params:
            condition: The raw condition text
            reason: Why the condition is invalid
        """
        self.condition = condition
        self.reason = reason
        super().__init__(f'Invalid condition "{condition}": {reason}')


class InvalidVariationError(LGError):
    """Raised in strict mode when a variation line is malformed."""

    err_code = ErrorCode.INVALID_VARIATION

    def __init__(self, variation: str, reason: str):
        """
        Initialize the exception.

        Params:
            variation: The raw variation text
            reason: Why the variation is invalid
        """
        self.variation = variation
        self.reason = reason
        super().__init__(f'Invalid variation "{variation}": {reason}')


class TranslationServiceError(LGError):
    """Raised when the remote translation service call fails."""

    err_code = ErrorCode.TRANSLATE_SERVICE_FAIL

    def __init__(self, message: str, status_code: int | None = None):
        """
        Initialize the exception.

        Params:
            message: Error message describing the service failure
            status_code: HTTP status code, when a response was received
        """
        self.status_code = status_code
        super().__init__(message)
