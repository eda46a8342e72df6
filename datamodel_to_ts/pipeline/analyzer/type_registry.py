"""
Type registry for scalar kinds and custom types.

Maps every scalar kind and per-field override to the TypeScript type to
print, and owns the deduplicated set of type definitions and imports that
must accompany the generated document.

The registry has two phases. During construction it resolves the scalar
kind table and pre-scans all field documentation for per-field types. It is
then frozen: emitters only read from it (and mark types as used).
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from enum import IntEnum

from ...errors import ConfigurationError, OverrideGrammarError, SchemaReferenceError
from ..config import SCALAR_TYPE_OPTIONS, GeneratorConfig, ScalarKind
from ..schema_ast.nodes import Datamodel
from .override_parser import OverrideKind, is_type_name, parse_field_documentation, parse_override

logger = logging.getLogger(__name__)

# Helper types defined in the output so users don't need to define them.
BUILTIN_CUSTOM_TYPES = {
    "ArrayObject": "{ [index: number]: number } & { length?: never }",
    "BufferObject": '{ type: "Buffer"; data: number[] }',
    "Decimal": "{ valueOf(): string }",
    "JsonValue": "string | number | boolean | { [key in string]?: JsonValue } | Array<JsonValue> | null",
}

# A type is complex if it contains a union (|), intersection (&), conditional (?), or
# function (=>) anywhere. This also catches types like "Record<string, string | number>",
# which don't strictly need wrapping, but the parentheses are harmless there.
COMPLEX_TYPE_PATTERN = re.compile(r"[|&?]|=>")


class PrecedenceClass(IntEnum):
    """Ranking used when two records share a type name. Higher wins."""

    INLINE = 0
    BUILTIN = 1
    DEFINED = 2
    IMPORT = 3


@dataclass
class CustomType:
    """How a type name is declared or imported in the output."""

    name: str
    definition: str | None = None
    import_source: str | None = None
    precedence: PrecedenceClass = PrecedenceClass.INLINE


@dataclass(frozen=True)
class PerFieldType:
    """A per-field override. Literal types never get an array suffix."""

    custom_type: CustomType
    literal: bool = False


def is_complex_type(type_string: str) -> bool:
    """Check whether a type needs parentheses before a suffix is appended."""
    return COMPLEX_TYPE_PATTERN.search(type_string) is not None


def locale_key(name: str) -> tuple[str, str]:
    """Sort key ordering names case-insensitively, then by exact spelling."""
    return (name.lower(), name)


class TypeRegistry:
    """Resolves scalar kinds and overrides to TypeScript types."""

    def __init__(self, config: GeneratorConfig, datamodel: Datamodel | None = None):
        """
        Build the registry.

        Args:
            config: Resolved configuration
            datamodel: Datamodel to pre-scan for per-field types

        Raises:
            ConfigurationError: If a scalar type option cannot be resolved
            OverrideGrammarError: If a per-field type is invalid
        """
        self.type_import_path = config.type_import_path

        # Only one CustomType exists per type name; later definitions upgrade it in place
        self._cache: dict[str, CustomType] = {}
        self._used: set[str] = set()
        self._per_field: dict[tuple[str, str], PerFieldType] = {}
        self._frozen = False

        self._kind_table: dict[ScalarKind, CustomType] = {}
        for kind, option in SCALAR_TYPE_OPTIONS.items():
            try:
                self._kind_table[kind] = self._register(config.scalar_type(kind))
            except OverrideGrammarError as e:
                raise ConfigurationError([f"Invalid {option}: {e}"]) from e

        if config.per_field_types and datamodel is not None:
            self._prepare_per_field_types(datamodel)

        self._frozen = True

    def _prepare_per_field_types(self, datamodel: Datamodel) -> None:
        """
        Register every per-field type found in field documentation.

        This MUST happen before emission: a field may use a type that is
        defined or imported on another field, so all fields are scanned first.
        """
        for model in datamodel.declarations:
            for field in model.fields:
                documentation = parse_field_documentation(field.documentation)
                if documentation.type_string is None:
                    continue

                type_string = documentation.type_string
                try:
                    custom_type = self._register(type_string, import_unknown=not documentation.literal)
                except OverrideGrammarError as e:
                    hint = ""
                    if not documentation.literal:
                        hint = f"\nIf this was meant to be a literal type, add an exclamation point: ![{type_string}]"
                    raise OverrideGrammarError(
                        f"{model.name}.{field.name} has an invalid custom type: [{type_string}] ({e}){hint}"
                    ) from e

                self._per_field[(model.name, field.name)] = PerFieldType(custom_type, documentation.literal)

    def _register(self, type_string: str, import_unknown: bool = False) -> CustomType:
        """
        Create or upgrade the record for an override string.

        Args:
            type_string: Raw override string
            import_unknown: Import plain type names instead of using them inline

        Returns:
            The canonical record for the type name
        """
        override = parse_override(type_string)

        if override.kind is OverrideKind.IMPORT:
            return self._upsert(
                CustomType(
                    name=override.name,
                    import_source=self._import_source(type_string, override.body),
                    precedence=PrecedenceClass.IMPORT,
                )
            )

        if override.kind is OverrideKind.DEFINED:
            return self._upsert(CustomType(name=override.name, definition=override.body, precedence=PrecedenceClass.DEFINED))

        builtin = BUILTIN_CUSTOM_TYPES.get(type_string)
        if builtin is not None:
            return self._upsert(CustomType(name=type_string, definition=builtin, precedence=PrecedenceClass.BUILTIN))

        if import_unknown:
            if not is_type_name(type_string):
                raise OverrideGrammarError(f"'{type_string}' is not an importable type name")
            return self._upsert(
                CustomType(
                    name=type_string,
                    import_source=self._import_source(type_string, None),
                    precedence=PrecedenceClass.IMPORT,
                )
            )

        return self._upsert(CustomType(name=type_string))

    def _import_source(self, type_string: str, module_path: str | None) -> str:
        source = module_path or self.type_import_path
        if not source:
            raise OverrideGrammarError(f"Type '{type_string}' requires an import, but typeImportPath is not set!")
        return source

    def _upsert(self, custom_type: CustomType) -> CustomType:
        if self._frozen:
            raise RuntimeError(f"Type registry is frozen, cannot register '{custom_type.name}'")

        cached = self._cache.get(custom_type.name)
        if cached is None:
            self._cache[custom_type.name] = custom_type
            return custom_type

        if custom_type.precedence > cached.precedence:
            logger.debug(
                "Upgrading type %s from %s to %s",
                cached.name,
                cached.precedence.name,
                custom_type.precedence.name,
            )
            cached.definition = custom_type.definition
            cached.import_source = custom_type.import_source
            cached.precedence = custom_type.precedence

        return cached

    def get(self, name: str) -> CustomType | None:
        """Get the canonical record for a type name, without marking it used."""
        return self._cache.get(name)

    def type_for_kind(self, kind: ScalarKind | str) -> str:
        """
        Get the TypeScript type for a scalar kind and mark it used.

        Raises:
            SchemaReferenceError: If the kind is not a known scalar kind
        """
        try:
            custom_type = self._kind_table[ScalarKind(kind)]
        except ValueError:
            raise SchemaReferenceError(f"Unknown scalar type: {kind}") from None

        self._used.add(custom_type.name)
        return custom_type.name

    def per_field_type(self, model_name: str, field_name: str) -> PerFieldType | None:
        """Get the per-field override for a field, if any, and mark it used."""
        per_field_type = self._per_field.get((model_name, field_name))
        if per_field_type is None:
            return None

        self._used.add(per_field_type.custom_type.name)
        return per_field_type

    def _used_types(self) -> list[CustomType]:
        return [self._cache[name] for name in sorted(self._used, key=locale_key)]

    def type_definitions(self) -> list[str]:
        """Get a `type Name = definition;` line for each used defined type, sorted by name."""
        return [
            f"type {t.name} = {t.definition};"
            for t in self._used_types()
            if t.definition is not None and t.import_source is None
        ]

    def type_imports(self) -> list[str]:
        """Get one import statement per module path for used imported types, sorted by path."""
        by_source: dict[str, list[str]] = defaultdict(list)
        for custom_type in self._used_types():
            if custom_type.import_source is not None:
                by_source[custom_type.import_source].append(custom_type.name)

        return [f'import {{ {", ".join(names)} }} from "{source}";' for source, names in sorted(by_source.items())]
