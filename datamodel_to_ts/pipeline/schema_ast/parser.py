"""
Datamodel parser that builds the node tree.

Phase 1 of the pipeline: turn the DMMF-style JSON document produced by the
schema library into read-only nodes. No validation of the schema itself is
done here; the schema library has already validated it.
"""

from __future__ import annotations

from typing import Any

from ...errors import SchemaReferenceError
from .nodes import Datamodel, EnumNode, FieldKind, FieldNode, ModelNode


class DatamodelParser:
    """Parses a DMMF datamodel dictionary into a Datamodel."""

    def parse(self, document: dict[str, Any]) -> Datamodel:
        """
        Parse a datamodel document.

        Args:
            document: Either a full DMMF document (with a "datamodel" key)
                or the datamodel itself

        Returns:
            Datamodel with enums, models and embedded types in schema order
        """
        datamodel = document.get("datamodel", document)

        return Datamodel(
            enums=tuple(self._parse_enum(e) for e in datamodel.get("enums") or []),
            models=tuple(self._parse_model(m) for m in datamodel.get("models") or []),
            types=tuple(self._parse_model(t) for t in datamodel.get("types") or []),
        )

    def _parse_enum(self, data: dict[str, Any]) -> EnumNode:
        values = []
        for value in data.get("values") or []:
            # DMMF stores values as {"name": ..., "dbName": ...}; plain strings are accepted too
            values.append(value["name"] if isinstance(value, dict) else str(value))

        return EnumNode(
            name=data["name"],
            values=tuple(values),
            documentation=data.get("documentation"),
        )

    def _parse_model(self, data: dict[str, Any]) -> ModelNode:
        name = data["name"]
        return ModelNode(
            name=name,
            fields=tuple(self._parse_field(f, name) for f in data.get("fields") or []),
            documentation=data.get("documentation"),
        )

    def _parse_field(self, data: dict[str, Any], model_name: str) -> FieldNode:
        kind = data.get("kind", "scalar")
        try:
            field_kind = FieldKind(kind)
        except ValueError:
            raise SchemaReferenceError(f"Unknown field kind: {kind} ({model_name}.{data.get('name')})") from None

        return FieldNode(
            name=data["name"],
            kind=field_kind,
            type_name=data["type"],
            is_required=bool(data.get("isRequired", True)),
            is_list=bool(data.get("isList", False)),
            has_default_value=bool(data.get("hasDefaultValue", False)),
            documentation=data.get("documentation"),
        )


def parse_datamodel(document: dict[str, Any]) -> Datamodel:
    """
    Convenience function to parse a datamodel document.

    Args:
        document: DMMF document or bare datamodel dictionary

    Returns:
        Parsed Datamodel
    """
    return DatamodelParser().parse(document)
