"""
Text helpers for LG template lines.

This module contains the line-level helpers used by the template body
parser and the translation driver that don't depend on parser state.
"""

from mslg.core import markers


def remove_template_link_references(line: str) -> str:
    """
    Collapse inline template links so they read as plain bracketed labels.

    ``[Greeting](./greetings.lg#Greeting)`` becomes ``[Greeting]``; text
    around the link is preserved. Embedded template references inside
    prose are therefore never mistaken for file references.

    Params:
        line: Raw template body line

    Returns:
        Line with every ``](target)`` replaced by ``]``
    """
    return markers.TEMPLATE_LINK_PATTERN.sub("]", line)


def find_entity_references(line: str) -> list[str]:
    """
    Find entity mentions (``{name}``) in a template line.

    Params:
        line: Template body line

    Returns:
        Entity names in order of first appearance, without duplicates
    """
    names = []
    for match in markers.ENTITY_REFERENCE_PATTERN.finditer(line):
        name = match.group("name")
        if name not in names:
            names.append(name)
    return names


def split_list_marker(line: str) -> tuple[str, str] | None:
    """
    Split a list item line into its marker and payload.

    Params:
        line: Template body line, possibly indented

    Returns:
        ``(marker, payload)`` with the payload trimmed, or None when the line
        does not start with a list marker
    """
    stripped = line.lstrip()
    if not stripped or stripped[0] not in markers.LIST_MARKERS:
        return None
    return stripped[0], stripped[1:].strip()


def match_prefix(text: str, prefixes: tuple[str, ...]) -> str | None:
    """Return the first prefix that ``text`` starts with, or None."""
    for prefix in prefixes:
        if text.startswith(prefix):
            return prefix
    return None


def parse_file_reference(line: str) -> tuple[str, str] | None:
    """
    Extract label and link target from a ``[label](target)`` line.

    Params:
        line: First line of a file-reference chunk

    Returns:
        ``(label, target)`` with the target trimmed, or None when the line has
        no parenthesized link
    """
    match = markers.FILE_REF_PATTERN.match(line.strip())
    if not match:
        return None
    return match.group("label"), match.group("target").strip()
