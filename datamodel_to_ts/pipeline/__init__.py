"""
Pipeline - datamodel to TypeScript declarations.

1. Phase 1 (Parser): Parse the DMMF datamodel into nodes
2. Phase 2 (Analyzer): Build name maps and the type registry
3. Phase 3 (Emitters): Render enum and model declarations
4. Phase 4 (Assembler): Join fragments into one document
5. Phase 5 (Formatter): Optional post-processing with prettier
6. Phase 6 (Writer): Atomic write of the output file
"""

from __future__ import annotations

from .config import (
    EnumType,
    FormatterConfig,
    GeneratorConfig,
    ModelType,
    ScalarKind,
    resolve_config,
)
from .generator import PipelineGenerator, generate_file
from .schema_ast import Datamodel, parse_datamodel
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "generate_file",
    "GeneratorConfig",
    "FormatterConfig",
    "ModelType",
    "EnumType",
    "ScalarKind",
    "resolve_config",
    "Datamodel",
    "parse_datamodel",
    "AtomicWriter",
]
