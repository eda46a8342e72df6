"""
Model emitter.

Renders one TypeScript declaration per model or embedded type. Each field's
type comes from a per-field override, the type registry (scalars), or the
name maps (relations and enums), and is then combined with the optional,
array and nullable modifiers.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import SchemaReferenceError
from ...utils import documentation_block
from ..analyzer.name_resolver import NameMaps
from ..analyzer.override_parser import parse_field_documentation
from ..analyzer.type_registry import TypeRegistry, is_complex_type
from ..config import GeneratorConfig
from ..schema_ast.nodes import FieldKind, FieldNode, ModelNode
from .base import TemplateEmitter

# Synthetic field holding relation counts
COUNT_FIELD_NAME = "_count"
COUNT_TYPE = "number"


@dataclass(frozen=True)
class ResolvedField:
    """A field's TypeScript type before the modifiers are applied."""

    type_name: str
    is_list: bool = False

    # Forced optional by the relation policy
    optional: bool = False

    # Relation to an embedded type: never optional
    embedded: bool = False

    # Relation to a model: eligible for the relation count field
    relation: bool = False


class ModelEmitter(TemplateEmitter):
    """Emits model and embedded type declarations."""

    TEMPLATE_NAME = "model.ts.jinja2"

    def __init__(self, config: GeneratorConfig, name_maps: NameMaps, registry: TypeRegistry):
        super().__init__(config)
        self.name_maps = name_maps
        self.registry = registry

    def emit(self, model: ModelNode) -> str:
        """
        Emit the declaration for a model or embedded type.

        Fields keep their schema order; omitted relations are left out
        entirely.

        Args:
            model: The model to emit

        Returns:
            TypeScript source for the model, without a trailing newline

        Raises:
            SchemaReferenceError: If a field references an unknown model, enum or scalar
        """
        fields = []
        counted_relations = []
        for field in model.fields:
            resolved = self.resolve_field(model, field)
            if resolved is None:
                continue
            fields.append(self.render_field(field, resolved))
            if resolved.relation and resolved.is_list:
                counted_relations.append(field.name)

        if self.config.relation_counts and counted_relations:
            fields.append(self._render_counts(counted_relations))

        documentation = documentation_block(model.documentation) if self.config.include_comments else ""

        return self.render(
            model_type=self.config.model_type.value,
            documentation=documentation,
            name=self.name_maps.declaration_name(model.name),
            fields=fields,
        )

    def resolve_field(self, model: ModelNode, field: FieldNode) -> ResolvedField | None:
        """
        Resolve the type of a field.

        Returns:
            The resolved field, or None if the field is omitted
        """
        per_field_type = self.registry.per_field_type(model.name, field.name)
        if per_field_type is not None:
            # Literal types are used as-is, so they never get '[]'
            return ResolvedField(
                per_field_type.custom_type.name,
                is_list=field.is_list and not per_field_type.literal,
            )

        if field.kind is FieldKind.SCALAR:
            return ResolvedField(self.registry.type_for_kind(field.type_name), is_list=field.is_list)

        if field.kind is FieldKind.OBJECT:
            if field.type_name in self.name_maps.models:
                if self.config.omit_relations:
                    return None
                return ResolvedField(
                    self.name_maps.models[field.type_name],
                    is_list=field.is_list,
                    optional=self.config.optional_relations,
                    relation=True,
                )
            if field.type_name in self.name_maps.types:
                # Embedded types are always present with their parent
                return ResolvedField(self.name_maps.types[field.type_name], is_list=field.is_list, embedded=True)
            raise SchemaReferenceError(f"Unknown model name: {field.type_name}")

        if field.kind is FieldKind.ENUM:
            return ResolvedField(self.name_maps.enum_name(field.type_name), is_list=field.is_list)

        if field.kind is FieldKind.UNSUPPORTED:
            return ResolvedField("any", is_list=field.is_list)

        raise SchemaReferenceError(f"Unknown field kind: {field.kind}")

    def render_field(self, field: FieldNode, resolved: ResolvedField) -> str:
        """Render a field line, with its documentation block if enabled."""
        nullable = not field.is_required

        optional = not resolved.embedded and (
            resolved.optional
            or (nullable and self.config.optional_nullables)
            or (field.has_default_value and self.config.optional_defaults)
        )

        # Complex types need parentheses so they end up like `(string | number)[]` or
        # `(() => string) | null` and not like `string | number[]` or `() => string | null`
        type_text = resolved.type_name
        if (resolved.is_list or nullable) and is_complex_type(type_text):
            type_text = f"({type_text})"
        if resolved.is_list:
            type_text += "[]"
        if nullable:
            type_text += " | null"

        documentation = ""
        if self.config.include_comments:
            documentation = documentation_block(parse_field_documentation(field.documentation).text, indent=2)

        return f"{documentation}  {field.name}{'?' if optional else ''}: {type_text};"

    def _render_counts(self, relation_names: list[str]) -> str:
        optional = "?" if self.config.optional_relation_counts else ""
        lines = [f"  {COUNT_FIELD_NAME}{optional}: {{"]
        lines.extend(f"    {name}: {COUNT_TYPE};" for name in relation_names)
        lines.append("  };")
        return "\n".join(lines)
