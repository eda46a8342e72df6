"""
Analyzer module.

Contains name resolution, override parsing and the type registry.
"""

from __future__ import annotations

from .name_resolver import NameMaps, build_name_maps
from .override_parser import (
    FieldDocumentation,
    OverrideKind,
    TypeOverride,
    parse_field_documentation,
    parse_override,
)
from .type_registry import (
    BUILTIN_CUSTOM_TYPES,
    CustomType,
    PerFieldType,
    PrecedenceClass,
    TypeRegistry,
    is_complex_type,
)

__all__ = [
    "NameMaps",
    "build_name_maps",
    "FieldDocumentation",
    "OverrideKind",
    "TypeOverride",
    "parse_field_documentation",
    "parse_override",
    "BUILTIN_CUSTOM_TYPES",
    "CustomType",
    "PerFieldType",
    "PrecedenceClass",
    "TypeRegistry",
    "is_complex_type",
]
