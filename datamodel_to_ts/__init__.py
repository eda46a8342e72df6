"""Datamodel to TypeScript Generator

A Python package for generating TypeScript type declarations from a
Prisma-style datamodel (enums, models, embedded types), with configurable
naming, optionality, scalar type mapping and custom or imported types.
"""

__version__ = "1.0.1"

from .errors import (
    ConfigurationError,
    ExternalToolError,
    GenerationError,
    OverrideGrammarError,
    SchemaReferenceError,
)
from .pipeline import (
    AtomicWriter,
    Datamodel,
    GeneratorConfig,
    PipelineGenerator,
    generate_file,
    parse_datamodel,
    resolve_config,
)

__all__ = [
    "PipelineGenerator",
    "generate_file",
    "GeneratorConfig",
    "resolve_config",
    "Datamodel",
    "parse_datamodel",
    "AtomicWriter",
    "GenerationError",
    "ConfigurationError",
    "SchemaReferenceError",
    "OverrideGrammarError",
    "ExternalToolError",
]
