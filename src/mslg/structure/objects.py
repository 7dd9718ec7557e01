"""
LG object model.

This module defines the structures produced by the parser: entities,
conditional response blocks, templates, and the aggregate parse result.
Models serialize with camelCase aliases so the JSON shape matches the one
consumed by other LG tooling.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mslg.core import markers

logger = logging.getLogger(__name__)


class EntityType(Enum):
    """Type of an entity declared or referenced in an LG file."""

    STRING = "string"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    DATETIME = "datetime"
    BUILTIN = "builtin"
    CUSTOM = "custom"
    UNRESOLVED = "unresolved"  # Referenced in template text, never declared

    @classmethod
    def from_name(cls, name: str) -> "EntityType":
        """
        Resolve a type name as written in an entity definition.

        Lookup is case-insensitive. Names that do not match a known type are
        treated as custom types.

        Params:
            name: Type token from the entity definition

        Returns:
            Matching EntityType member
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            logger.debug("Unknown entity type %r, treating as custom", name)
            return cls.CUSTOM


class LGModel(BaseModel):
    """Base class for all LG object model types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class EntityAttribute(LGModel):
    """Key/value attribute attached to an entity definition."""

    key: str
    value: str | None = None


class Entity(LGModel):
    """
    Named, typed placeholder usable inside template text.

    Params:
        name: Entity name, unique within a ParseResult
        entity_type: Declared type, UNRESOLVED for auto-detected entities
        attributes: Ordered key/value attributes from the definition
    """

    name: str
    entity_type: EntityType = EntityType.UNRESOLVED
    attributes: list[EntityAttribute] = Field(default_factory=list)


class ConditionalResponse(LGModel):
    """
    A single IF/ELSEIF/ELSE branch of a template.

    Params:
        condition: Normalized condition expression, or the ELSE marker
        variations: Ordered variation strings, duplicates suppressed
    """

    condition: str
    variations: list[str] = Field(default_factory=list)

    @property
    def is_default(self) -> bool:
        """Check if this block is the unconditional ELSE branch."""
        return self.condition == markers.ELSE

    def add_variation(self, text: str) -> bool:
        """
        Append a variation unless it is already present.

        Params:
            text: Variation text

        Returns:
            True if the variation was appended
        """
        if text in self.variations:
            return False
        self.variations.append(text)
        return True


class Template(LGModel):
    """
    Named unit of generatable text.

    A template holds flat variations, conditional response blocks, or both
    (flat variations first). A valid template has at least one of either.

    Params:
        name: Template name, unique within a ParseResult
        variations: Flat variation strings, duplicates suppressed
        conditional_responses: Ordered conditional response blocks
    """

    name: str
    variations: list[str] = Field(default_factory=list)
    conditional_responses: list[ConditionalResponse] = Field(default_factory=list)

    def add_variation(self, text: str) -> bool:
        """
        Append a flat variation unless it is already present.

        Params:
            text: Variation text

        Returns:
            True if the variation was appended
        """
        if text in self.variations:
            return False
        self.variations.append(text)
        return True

    def get_conditional_response(self, condition: str) -> ConditionalResponse | None:
        """Return the block with exactly this condition text, if any."""
        for block in self.conditional_responses:
            if block.condition == condition:
                return block
        return None

    def is_empty(self) -> bool:
        """Check if the template has neither variations nor conditional blocks."""
        return not self.variations and not self.conditional_responses

    def merge(self, other: "Template") -> None:
        """
        Merge another template with the same name into this one.

        Flat variations are unioned in order. Conditional blocks are matched
        by exact condition text; matched blocks union their variations and
        unmatched blocks are appended as copies.

        Params:
            other: Template to merge in
        """
        for variation in other.variations:
            self.add_variation(variation)
        for block in other.conditional_responses:
            existing = self.get_conditional_response(block.condition)
            if existing is None:
                self.conditional_responses.append(block.model_copy(deep=True))
            else:
                for variation in block.variations:
                    existing.add_variation(variation)


class ParseResult(LGModel):
    """
    Aggregate of everything discovered while parsing LG content.

    Params:
        templates: Templates, unique by name, in encounter order
        entities: Entities, unique by name, in encounter order
        additional_file_references: Paths of other LG files to parse and merge
    """

    templates: list[Template] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)
    additional_file_references: list[str] = Field(default_factory=list)

    def get_template(self, name: str) -> Template | None:
        """Return the template with exactly this name, if any."""
        for template in self.templates:
            if template.name == name:
                return template
        return None

    def get_entity(self, name: str) -> Entity | None:
        """Return the entity with exactly this name, if any."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None

    def merge(self, other: "ParseResult") -> "ParseResult":
        """
        Merge another parse result into this one in place.

        Same-name templates are merged (see ``Template.merge``), entities
        that already exist only take the other entity's type, and file
        references are appended when not yet present.

        Params:
            other: Parse result to merge in

        Returns:
            This parse result, for chaining
        """
        for template in other.templates:
            existing = self.get_template(template.name)
            if existing is None:
                self.templates.append(template.model_copy(deep=True))
            else:
                logger.debug("Merging template %r", template.name)
                existing.merge(template)

        for entity in other.entities:
            existing_entity = self.get_entity(entity.name)
            if existing_entity is None:
                self.entities.append(entity.model_copy(deep=True))
            elif entity.entity_type is not EntityType.UNRESOLVED:
                existing_entity.entity_type = entity.entity_type

        for reference in other.additional_file_references:
            if reference not in self.additional_file_references:
                self.additional_file_references.append(reference)

        return self

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON using the camelCase field aliases."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> "ParseResult":
        """Build a parse result from JSON produced by ``to_json``."""
        return cls.model_validate_json(data)
