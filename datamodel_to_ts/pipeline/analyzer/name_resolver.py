"""
Name resolver for rendered declaration names.

Builds the three name maps (enums, models, embedded types) from declared
names to rendered names, i.e. the declared name wrapped in the configured
prefix and suffix.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...errors import SchemaReferenceError
from ..config import GeneratorConfig
from ..schema_ast.nodes import Datamodel


@dataclass(frozen=True)
class NameMaps:
    """Declared name to rendered name, one map per entity category."""

    enums: dict[str, str] = field(default_factory=dict)
    models: dict[str, str] = field(default_factory=dict)
    types: dict[str, str] = field(default_factory=dict)

    def enum_name(self, name: str) -> str:
        try:
            return self.enums[name]
        except KeyError:
            raise SchemaReferenceError(f"Unknown enum name: {name}") from None

    def declaration_name(self, name: str) -> str:
        """Rendered name of a model or embedded type (a name is never both)."""
        rendered = self.models.get(name) or self.types.get(name)
        if rendered is None:
            raise SchemaReferenceError(f"Unknown model name: {name}")
        return rendered


def build_name_maps(datamodel: Datamodel, config: GeneratorConfig) -> NameMaps:
    """
    Build the name maps for a datamodel.

    Args:
        datamodel: The parsed datamodel
        config: Resolved configuration holding prefixes and suffixes

    Returns:
        The name maps
    """
    return NameMaps(
        enums={e.name: f"{config.enum_prefix}{e.name}{config.enum_suffix}" for e in datamodel.enums},
        models={m.name: f"{config.model_prefix}{m.name}{config.model_suffix}" for m in datamodel.models},
        types={t.name: f"{config.type_prefix}{t.name}{config.type_suffix}" for t in datamodel.types},
    )
