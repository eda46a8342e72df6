"""
Enum emitter.

Renders one TypeScript declaration per schema enum, as a union of string
literals, a native enum, or a const object with a derived union type.
"""

from __future__ import annotations

from ...utils import documentation_block
from ..analyzer.name_resolver import NameMaps
from ..config import GeneratorConfig
from ..schema_ast.nodes import EnumNode
from .base import TemplateEmitter


class EnumEmitter(TemplateEmitter):
    """Emits enum declarations."""

    TEMPLATE_NAME = "enum.ts.jinja2"

    def __init__(self, config: GeneratorConfig, name_maps: NameMaps):
        super().__init__(config)
        self.name_maps = name_maps

    def emit(self, enum: EnumNode) -> str:
        """
        Emit the declaration for an enum.

        Values are kept in schema order.

        Args:
            enum: The enum to emit

        Returns:
            TypeScript source for the enum, without a trailing newline
        """
        name = self.name_maps.enum_name(enum.name)
        documentation = documentation_block(enum.documentation) if self.config.include_comments else ""

        return self.render(
            enum_type=self.config.enum_type.value,
            documentation=documentation,
            export="export " if self.config.export_enums else "",
            name=name,
            object_name=f"{self.config.enum_object_prefix}{name}{self.config.enum_object_suffix}",
            values=enum.values,
            union=" | ".join(f'"{value}"' for value in enum.values) or "never",
        )
