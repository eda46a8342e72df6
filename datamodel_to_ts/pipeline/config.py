"""
Configuration for the TypeScript generator pipeline.

The host hands over a flat mapping of option name to raw string. The
resolver turns it into a frozen GeneratorConfig, collecting every problem
it finds before failing.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from ..errors import ConfigurationError

DEFAULT_HEADER_COMMENT = "This file was auto-generated by datamodel_to_ts"


class ModelType(str, Enum):
    """Declaration wrapper used for models and embedded types."""

    INTERFACE = "interface"  # export interface Name { ... }
    TYPE = "type"  # export type Name = { ... };


class EnumType(str, Enum):
    """Representation used for enums."""

    STRING_UNION = "stringUnion"  # type Name = "A" | "B";
    ENUM = "enum"  # enum Name { A = "A" }
    OBJECT = "object"  # const object plus derived union type


class ScalarKind(str, Enum):
    """Scalar field kinds, named as the schema library names them."""

    STRING = "String"
    BOOLEAN = "Boolean"
    INT = "Int"
    FLOAT = "Float"
    JSON = "Json"
    DATE_TIME = "DateTime"
    BIG_INT = "BigInt"
    DECIMAL = "Decimal"
    BYTES = "Bytes"


# Option name holding the type override for each scalar kind
SCALAR_TYPE_OPTIONS: dict[ScalarKind, str] = {
    ScalarKind.STRING: "stringType",
    ScalarKind.BOOLEAN: "booleanType",
    ScalarKind.INT: "intType",
    ScalarKind.FLOAT: "floatType",
    ScalarKind.JSON: "jsonType",
    ScalarKind.DATE_TIME: "dateType",
    ScalarKind.BIG_INT: "bigIntType",
    ScalarKind.DECIMAL: "decimalType",
    ScalarKind.BYTES: "bytesType",
}

STRING_OPTIONS: dict[str, str] = {
    "enumPrefix": "",
    "enumSuffix": "",
    "enumObjectPrefix": "",
    "enumObjectSuffix": "",
    "modelPrefix": "",
    "modelSuffix": "",
    "typePrefix": "",
    "typeSuffix": "",
    "headerComment": DEFAULT_HEADER_COMMENT,
}

NONEMPTY_STRING_OPTIONS: dict[str, str] = {
    "output": "interfaces.ts",
    "stringType": "string",
    "booleanType": "boolean",
    "intType": "number",
    "floatType": "number",
    "jsonType": "JsonValue",
    "dateType": "Date",
    "bigIntType": "bigint",
    "decimalType": "Decimal",
    "bytesType": "Uint8Array",
}

BOOLEAN_OPTIONS: dict[str, bool] = {
    "perFieldTypes": True,
    "exportEnums": True,
    "optionalRelations": True,
    "omitRelations": False,
    "optionalNullables": False,
    "optionalDefaults": False,
    "includeComments": False,
    "relationCounts": False,
    "optionalRelationCounts": True,
    "prettier": False,
}

CHOICE_OPTIONS: dict[str, tuple[type[Enum], Enum]] = {
    "modelType": (ModelType, ModelType.INTERFACE),
    "enumType": (EnumType, EnumType.STRING_UNION),
}

# Options only read when "prettier" is enabled
PRETTIER_OPTIONS = {"resolvePrettierConfig", "prettierConfigPath"}

OPTIONAL_NONEMPTY_STRING_OPTIONS = {"typeImportPath"}

KNOWN_OPTIONS = (
    set(STRING_OPTIONS)
    | set(NONEMPTY_STRING_OPTIONS)
    | set(BOOLEAN_OPTIONS)
    | set(CHOICE_OPTIONS)
    | PRETTIER_OPTIONS
    | OPTIONAL_NONEMPTY_STRING_OPTIONS
)


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for the prettier post-processing step."""

    # Whether formatting is enabled
    enabled: bool = False

    # Let prettier look up its own configuration file next to the output
    resolve_config: bool = True

    # Explicit prettier configuration file (absolute)
    config_path: Path | None = None


@dataclass(frozen=True)
class GeneratorConfig:
    """Fully resolved generation options. Never mutated after resolution."""

    output_file: Path = Path("interfaces.ts")

    # Naming
    enum_prefix: str = ""
    enum_suffix: str = ""
    enum_object_prefix: str = ""
    enum_object_suffix: str = ""
    model_prefix: str = ""
    model_suffix: str = ""
    type_prefix: str = ""
    type_suffix: str = ""

    header_comment: str = DEFAULT_HEADER_COMMENT
    model_type: ModelType = ModelType.INTERFACE
    enum_type: EnumType = EnumType.STRING_UNION

    # Scalar type overrides
    string_type: str = "string"
    boolean_type: str = "boolean"
    int_type: str = "number"
    float_type: str = "number"
    json_type: str = "JsonValue"
    date_type: str = "Date"
    big_int_type: str = "bigint"
    decimal_type: str = "Decimal"
    bytes_type: str = "Uint8Array"

    # Default module for imported custom types
    type_import_path: str | None = None

    per_field_types: bool = True
    export_enums: bool = True
    optional_relations: bool = True
    omit_relations: bool = False
    optional_nullables: bool = False
    optional_defaults: bool = False
    include_comments: bool = False
    relation_counts: bool = False
    optional_relation_counts: bool = True

    formatter: FormatterConfig = FormatterConfig()

    def scalar_type(self, kind: ScalarKind) -> str:
        """Get the configured override string for a scalar kind."""
        return getattr(self, _snake_case(SCALAR_TYPE_OPTIONS[kind]))


def _snake_case(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


def _quote(value: Any) -> str:
    return json.dumps(value)


class ConfigResolver:
    """Validates raw options and builds a GeneratorConfig.

    Errors are accumulated in ``errors`` instead of raised one by one, so the
    user sees every problem at once.
    """

    def __init__(self, options: Mapping[str, Any], schema_dir: str | Path = "."):
        self.options = dict(options)
        self.schema_dir = Path(schema_dir)
        self.errors: list[str] = []

    def resolve(self) -> GeneratorConfig:
        """
        Resolve the options.

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If any option is unknown or invalid
        """
        for name in self.options:
            if name not in KNOWN_OPTIONS:
                self.errors.append(f"Unknown option: {_quote(name)}")

        values: dict[str, Any] = {}
        for name, default in STRING_OPTIONS.items():
            values[_snake_case(name)] = self.string(name, default)
        for name, default in NONEMPTY_STRING_OPTIONS.items():
            values[_snake_case(name)] = self.nonempty_string(name, default)
        for name, default in BOOLEAN_OPTIONS.items():
            values[_snake_case(name)] = self.boolean(name, default)
        for name, (choices, default) in CHOICE_OPTIONS.items():
            values[_snake_case(name)] = self.choice(name, choices, default)

        values["type_import_path"] = self.optional_nonempty_string("typeImportPath")
        self._check_scalar_imports(values)

        output = values.pop("output")
        values["output_file"] = self.schema_dir / output
        values["formatter"] = self._resolve_formatter(values.pop("prettier"))

        if self.errors:
            raise ConfigurationError(self.errors)

        return GeneratorConfig(**values)

    def _check_scalar_imports(self, values: dict[str, Any]) -> None:
        """Record scalar type options that import a type from no module."""
        # Local import: the analyzer package imports this module
        from .analyzer.override_parser import OverrideKind, parse_override

        if values["type_import_path"] is not None:
            return

        for option in SCALAR_TYPE_OPTIONS.values():
            value = values[_snake_case(option)]
            override = parse_override(value)
            if override.kind is OverrideKind.IMPORT and override.body is None:
                self.errors.append(f"Invalid {option}: Type '{value}' requires an import, but typeImportPath is not set!")

    def _resolve_formatter(self, enabled: bool) -> FormatterConfig:
        # The prettier options are meaningless when prettier is off, so they are not validated
        if not enabled:
            return FormatterConfig(enabled=False)

        config_path = self.optional_nonempty_string("prettierConfigPath")
        if config_path == "null":
            config_path = None
        return FormatterConfig(
            enabled=True,
            resolve_config=self.boolean("resolvePrettierConfig", True),
            config_path=(self.schema_dir / config_path).resolve() if config_path else None,
        )

    def string(self, name: str, default: str) -> str:
        value = self.options.get(name, default)
        if not isinstance(value, str):
            self.errors.append(f"Invalid {name}: {_quote(value)}")
            return default
        return value

    def nonempty_string(self, name: str, default: str) -> str:
        value = self.options.get(name, default)
        if not isinstance(value, str) or not value.strip():
            self.errors.append(f"Invalid {name}: {_quote(value)}")
            return default
        return value

    def optional_nonempty_string(self, name: str) -> str | None:
        if name not in self.options:
            return None
        value = self.options[name]
        if not isinstance(value, str) or not value.strip():
            self.errors.append(f"Invalid {name}: {_quote(value)}")
            return None
        return value

    def boolean(self, name: str, default: bool) -> bool:
        value = self.options.get(name)
        if value is None:
            return default
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False

        self.errors.append(f"Invalid {name}: {_quote(value)}")
        return default

    def choice(self, name: str, choices: type[Enum], default: Enum) -> Any:
        value = self.options.get(name)
        if value is None:
            return default
        for member in choices:
            if member.value == value:
                return member

        self.errors.append(f"Invalid {name}: {_quote(value)}")
        return default


def resolve_config(options: Mapping[str, Any] | None = None, schema_dir: str | Path = ".") -> GeneratorConfig:
    """
    Convenience function to resolve configuration.

    Args:
        options: Raw option name to string mapping from the host
        schema_dir: Directory relative paths are resolved against

    Returns:
        Resolved configuration
    """
    return ConfigResolver(options or {}, schema_dir).resolve()
