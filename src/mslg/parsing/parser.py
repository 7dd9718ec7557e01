"""
Parser for LG template chunks.

This module turns pre-split chunks of an LG file into the object model:
templates with flat variations and conditional response blocks, entity
definitions, and references to additional LG files. Re-encountered
templates and conditions are merged into the existing objects.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from mslg.core import markers
from mslg.core.types import ChunkList
from mslg.exceptions import (
    EmptyTemplateError,
    ErrorContext,
    InvalidEntityDefinitionError,
    InvalidFileReferenceError,
    LGError,
    MissingListDecorationError,
    UnrecognizedChunkError,
)
from mslg.parsing.utils import (
    find_entity_references,
    match_prefix,
    parse_file_reference,
    remove_template_link_references,
    split_list_marker,
)
from mslg.parsing.validation import validate_condition, validate_variation_item
from mslg.structure.objects import (
    ConditionalResponse,
    Entity,
    EntityAttribute,
    EntityType,
    ParseResult,
    Template,
)

logger = logging.getLogger(__name__)


class ChunkType(Enum):
    """Kind of chunk, decided by the first character of its first line."""

    TEMPLATE = "template"
    FILE_REFERENCE = "file_reference"
    ENTITY = "entity"


class BodyState(Enum):
    """State of the template body parser."""

    FLAT = "flat"  # Plain lines attach to the template's variations
    CONDITIONAL = "conditional"  # Plain lines attach to the active block


def classify_chunk(chunk: str) -> ChunkType:
    """
    Classify a trimmed chunk by its leading marker.

    Params:
        chunk: Chunk text

    Returns:
        The chunk type

    Raises:
        UnrecognizedChunkError: If the chunk starts with no known marker
    """
    if chunk.startswith(markers.TEMPLATE):
        return ChunkType.TEMPLATE
    if chunk.startswith(markers.FILE_REF):
        return ChunkType.FILE_REFERENCE
    if chunk.startswith(markers.ENTITY):
        return ChunkType.ENTITY
    raise UnrecognizedChunkError(chunk)


@dataclass
class _ParseContext:
    """Name indexes over the ParseResult being populated."""

    result: ParseResult
    templates: dict[str, Template] = field(default_factory=dict)
    entities: dict[str, Entity] = field(default_factory=dict)

    def __post_init__(self):
        self.templates = {template.name: template for template in self.result.templates}
        self.entities = {entity.name: entity for entity in self.result.entities}

    def add_template(self, template: Template) -> None:
        self.result.templates.append(template)
        self.templates[template.name] = template

    def add_entity(self, entity: Entity) -> None:
        self.result.entities.append(entity)
        self.entities[entity.name] = entity


@dataclass
class _TemplateBody:
    """
    State machine for the lines of a single template chunk.

    Tracks whether plain lines go to the template or to a conditional block,
    and holds at most one newly created block until it is flushed into the
    template on the next condition marker or at end of chunk.
    """

    template: Template
    is_new: bool
    conditions: dict[str, ConditionalResponse] = field(default_factory=dict)
    state: BodyState = BodyState.FLAT
    active: ConditionalResponse | None = None
    pending: ConditionalResponse | None = None

    def __post_init__(self):
        self.conditions = {
            block.condition: block for block in self.template.conditional_responses
        }

    def flush(self) -> None:
        if self.pending is not None:
            self.template.conditional_responses.append(self.pending)
            self.pending = None

    def open_block(self, condition: str, requires_expression: bool) -> None:
        self.flush()
        existing = self.conditions.get(condition)
        if existing is not None:
            logger.debug(
                "Reusing condition %r in template %r", condition, self.template.name
            )
            self.active = existing
        else:
            validate_condition(condition, requires_expression)
            block = ConditionalResponse(condition=condition)
            self.conditions[condition] = block
            self.pending = block
            self.active = block
        self.state = BodyState.CONDITIONAL

    def add_variation(self, text: str) -> None:
        if self.state is BodyState.CONDITIONAL:
            self.active.add_variation(text)
        else:
            self.template.add_variation(text)


class LGParser:
    """Parser for pre-split LG file chunks."""

    def __init__(self, *, strict_variations: bool = False):
        """
        Initialize the parser.

        Params:
            strict_variations: Raise InvalidVariationError on malformed
                variation lines instead of dropping them
        """
        self.strict_variations = strict_variations

    def parse(
        self,
        chunks: ChunkList,
        result: ParseResult | None = None,
        source_file: str | None = None,
    ) -> ParseResult:
        """
        Parse chunks into a ParseResult.

        Chunks are processed in order. The first error aborts parsing and
        propagates with the chunk location attached.

        Params:
            chunks: Ordered chunk texts, each starting with a marker line
            result: Existing result to merge into; a new one is created if None
            source_file: File name reported in error locations

        Returns:
            The populated ParseResult

        Raises:
            LGError: On the first syntax or semantic error
        """
        if result is None:
            result = ParseResult()
        context = _ParseContext(result)

        for index, chunk in enumerate(chunks):
            try:
                self._parse_chunk(chunk.strip(), context)
            except LGError as error:
                error.with_context(ErrorContext(source_file=source_file, chunk_index=index))
                raise

        return result

    def _parse_chunk(self, chunk: str, context: _ParseContext) -> None:
        lines = markers.LINE_SPLIT_PATTERN.split(chunk)
        chunk_type = classify_chunk(chunk)

        if chunk_type is ChunkType.TEMPLATE:
            self._parse_template(lines, context)
        elif chunk_type is ChunkType.FILE_REFERENCE:
            self._parse_file_reference(lines[0], context)
        else:
            self._parse_entity_definition(lines[0], context)

    def _parse_template(self, lines: list[str], context: _ParseContext) -> None:
        header = lines[0]
        name = header[len(markers.TEMPLATE):].strip()
        if not name:
            raise EmptyTemplateError(
                name, f'Template header "{header}" does not have a template name'
            )

        existing = context.templates.get(name)
        if existing is not None:
            logger.debug("Merging into existing template %r", name)
            body = _TemplateBody(existing, is_new=False)
        else:
            body = _TemplateBody(Template(name=name), is_new=True)

        for line_number, line in enumerate(lines[1:], start=2):
            try:
                self._parse_template_line(line, body, context)
            except LGError as error:
                error.with_context(ErrorContext(line_number=line_number, line_text=line.strip()))
                raise

        body.flush()
        if body.is_new:
            context.add_template(body.template)

        if body.template.is_empty():
            raise EmptyTemplateError(name)

    def _parse_template_line(
        self, line: str, body: _TemplateBody, context: _ParseContext
    ) -> None:
        if not line.strip():
            return

        line = remove_template_link_references(line)

        for entity_name in find_entity_references(line):
            if entity_name not in context.entities:
                context.add_entity(Entity(name=entity_name))

        split = split_list_marker(line)
        if split is None:
            raise MissingListDecorationError(line.strip())
        _, payload = split

        condition_marker = match_prefix(payload, markers.CONDITION_MARKERS)
        default_marker = match_prefix(payload, markers.DEFAULT_MARKERS)

        if condition_marker:
            condition = payload[len(condition_marker):].strip()
            body.open_block(condition, requires_expression=True)
        elif default_marker:
            condition = (markers.ELSE + payload[len(default_marker):]).strip()
            body.open_block(condition, requires_expression=False)
        elif validate_variation_item(payload, strict=self.strict_variations):
            body.add_variation(payload)
        else:
            logger.debug(
                "Dropping invalid variation %r in template %r", payload, body.template.name
            )

    def _parse_file_reference(self, line: str, context: _ParseContext) -> None:
        reference = parse_file_reference(line)
        if reference is None or not reference[1]:
            raise InvalidFileReferenceError(line.strip())
        context.result.additional_file_references.append(reference[1])

    def _parse_entity_definition(self, line: str, context: _ParseContext) -> None:
        definition = line[len(markers.ENTITY):].split(":")
        if len(definition) != 2:
            raise InvalidEntityDefinitionError(line.strip())

        name = definition[0].strip()
        tokens = definition[1].split()
        if not name or not tokens:
            raise InvalidEntityDefinitionError(line.strip())

        entity_type = EntityType.from_name(tokens[0])
        # Attributes come as "key <separator> value" triplets
        attributes = [
            EntityAttribute(key=tokens[i], value=tokens[i + 2] if i + 2 < len(tokens) else None)
            for i in range(1, len(tokens), 3)
        ]

        existing = context.entities.get(name)
        if existing is not None:
            existing.entity_type = entity_type
        else:
            context.add_entity(
                Entity(name=name, entity_type=entity_type, attributes=attributes)
            )


def parse_chunks(
    chunks: ChunkList,
    result: ParseResult | None = None,
    *,
    strict_variations: bool = False,
    source_file: str | None = None,
) -> ParseResult:
    """
    Convenience function to parse a list of chunks.

    Params:
        chunks: Ordered chunk texts
        result: Existing result to merge into
        strict_variations: Raise on malformed variation lines
        source_file: File name reported in error locations

    Returns:
        The populated ParseResult

    Raises:
        LGError: On the first syntax or semantic error
    """
    parser = LGParser(strict_variations=strict_variations)
    return parser.parse(chunks, result=result, source_file=source_file)
