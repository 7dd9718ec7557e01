"""
Grammar markers of the LG file format.

All markers are literal, case-sensitive prefixes. Chunk markers are matched
against the first character of a chunk; list and condition markers are
matched against template body lines.
"""

import re

TEMPLATE = "#"
ENTITY = "$"
FILE_REF = "["
COMMENT = ">"

LIST_MARKERS = ("-", "*", "+")

IF = "IF:"
ELSEIF = "ELSEIF:"
ELSE = "ELSE:"
DEFAULT = "DEFAULT:"

CONDITION_MARKERS = (ELSEIF, IF)
DEFAULT_MARKERS = (ELSE, DEFAULT)

CHUNK_MARKERS = (TEMPLATE, ENTITY, FILE_REF)

LINE_SPLIT_PATTERN = re.compile(r"\r\n|\r|\n")

# [label](target) at the start of a file-reference line
FILE_REF_PATTERN = re.compile(r"^\[(?P<label>[^\]]*)\]\s*\((?P<target>.*?)\)")

# ](target) inside template text; the label before it is kept
TEMPLATE_LINK_PATTERN = re.compile(r"\]\((?:.*?)\)")

# Unicode-aware: a letter or underscore, then word characters
IDENTIFIER = r"[^\W\d]\w*"
IDENTIFIER_PATH = rf"{IDENTIFIER}(?:\.{IDENTIFIER})*"

# {entityName} or {entity.path}, whitespace tolerated inside the braces
ENTITY_REFERENCE_PATTERN = re.compile(
    rf"(?<!\\)\{{\s*(?P<name>{IDENTIFIER_PATH})\s*\}}"
)
