"""
Pipeline generator.

Ties the phases together:

1. Build name maps from the datamodel
2. Build and freeze the type registry (scalar kinds + per-field types)
3. Emit enums, then models, then embedded types
4. Assemble the document
5. Optionally format it with prettier
6. Write it atomically
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .analyzer.name_resolver import build_name_maps
from .analyzer.type_registry import TypeRegistry
from .assembler import DocumentAssembler, DocumentParts
from .config import GeneratorConfig, resolve_config
from .emitters.enum_emitter import EnumEmitter
from .emitters.model_emitter import ModelEmitter
from .formatters.base import Formatter
from .formatters.prettier_formatter import PrettierFormatter
from .schema_ast.nodes import Datamodel
from .writer.atomic_writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates a TypeScript declaration file from a datamodel."""

    def __init__(
        self,
        datamodel: Datamodel,
        config: GeneratorConfig,
        formatter: Formatter | None = None,
        writer: AtomicWriter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            datamodel: The parsed datamodel
            config: Resolved configuration
            formatter: Formatter used when formatting is enabled (prettier by default)
            writer: Writer for the output file
        """
        self.datamodel = datamodel
        self.config = config
        self.formatter = formatter or PrettierFormatter()
        self.writer = writer or AtomicWriter()

    def generate(self) -> str:
        """
        Generate the document in memory.

        Returns:
            The TypeScript source

        Raises:
            GenerationError: If anything about the datamodel or configuration is invalid
        """
        logger.info(
            "Generating %d enums, %d models, %d types",
            len(self.datamodel.enums),
            len(self.datamodel.models),
            len(self.datamodel.types),
        )

        name_maps = build_name_maps(self.datamodel, self.config)
        # Construction scans every field, so the registry is complete before emission
        registry = TypeRegistry(self.config, self.datamodel)

        enum_emitter = EnumEmitter(self.config, name_maps)
        model_emitter = ModelEmitter(self.config, name_maps, registry)

        parts = DocumentParts(header_comment=self.config.header_comment)
        parts.enums = [enum_emitter.emit(e) for e in self.datamodel.enums]
        parts.models = [model_emitter.emit(m) for m in self.datamodel.declarations]

        # Imports and definitions only exist once the emitters have marked types used
        parts.imports = registry.type_imports()
        parts.type_definitions = registry.type_definitions()

        code = DocumentAssembler().assemble(parts)

        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter, self.config.output_file)

        return code

    def write(self) -> Path:
        """
        Generate the document and write it to the configured output file.

        Returns:
            The path written
        """
        code = self.generate()
        self.writer.write(self.config.output_file, code)
        return self.config.output_file


def generate_file(
    datamodel: Datamodel,
    options: Mapping[str, Any] | None = None,
    schema_dir: str | Path = ".",
    formatter: Formatter | None = None,
) -> Path:
    """
    Convenience function to resolve options, generate and write in one go.

    Args:
        datamodel: The parsed datamodel
        options: Raw option name to string mapping
        schema_dir: Directory relative paths are resolved against
        formatter: Formatter override

    Returns:
        The path written
    """
    config = resolve_config(options, schema_dir)
    return PipelineGenerator(datamodel, config, formatter=formatter).write()
