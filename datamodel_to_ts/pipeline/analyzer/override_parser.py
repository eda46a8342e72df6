"""
Parser for type override strings.

An override string comes either from a scalar type option (e.g. "bytesType")
or from the last line of a field's documentation. Three forms are recognized,
tried in order:

    import:<Name>[:<modulePath>]   imported type
    <Name>:<body>                  type defined in the output file
    anything else                  literal type expression
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

IMPORT_PREFIX = "import:"

# Last documentation line holding a per-field type: "[Type]" or "![Type]"
PER_FIELD_TYPE_PATTERN = re.compile(r"^\s*(!?)\[\s*(\S.*)\]")


class OverrideKind(Enum):
    """Kind of a parsed override."""

    IMPORT = "import"
    DEFINED = "defined"
    LITERAL = "literal"


@dataclass(frozen=True)
class TypeOverride:
    """A parsed override string.

    Attributes:
        kind: Which of the three forms matched
        name: Type name to print (the whole string for literals)
        body: Definition for DEFINED, module path for IMPORT (may be None)
    """

    kind: OverrideKind
    name: str
    body: str | None = None


@dataclass(frozen=True)
class FieldDocumentation:
    """Field documentation split into its text and optional per-field type."""

    text: str | None
    type_string: str | None = None
    literal: bool = False


def is_type_name(text: str) -> bool:
    """Check whether text is a bare identifier (word characters and '$')."""
    return bool(text) and all(c.isalnum() or c in "_$" for c in text)


def parse_override(text: str) -> TypeOverride:
    """
    Parse an override string.

    Args:
        text: The raw override string

    Returns:
        The parsed override
    """
    if text.startswith(IMPORT_PREFIX):
        name, _, module_path = text[len(IMPORT_PREFIX) :].partition(":")
        if is_type_name(name):
            return TypeOverride(OverrideKind.IMPORT, name, module_path or None)

    else:
        name, separator, body = text.partition(":")
        if separator and body and is_type_name(name):
            return TypeOverride(OverrideKind.DEFINED, name, body)

    return TypeOverride(OverrideKind.LITERAL, text)


def parse_field_documentation(documentation: str | None) -> FieldDocumentation:
    """
    Split field documentation into comment text and per-field type.

    Only the last line is inspected. When it holds a per-field type it is
    removed from the comment text.
    """
    if not documentation:
        return FieldDocumentation(text=None)

    lines = documentation.split("\n")
    match = PER_FIELD_TYPE_PATTERN.match(lines[-1])
    if not match:
        return FieldDocumentation(text=documentation)

    return FieldDocumentation(
        text="\n".join(lines[:-1]) or None,
        type_string=match.group(2).strip(),
        literal=bool(match.group(1)),
    )
