"""
Errors raised while generating TypeScript declarations.

Every error aborts the whole run; nothing is written to disk once one of
these has been raised.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generation failures."""

    pass


class ConfigurationError(GenerationError):
    """Raised when one or more configuration options are invalid.

    All problems found during validation are collected in ``errors`` (sorted)
    and reported together in a single message.
    """

    def __init__(self, errors: list[str]):
        self.errors = sorted(errors)
        super().__init__("Invalid config:\n - " + "\n - ".join(self.errors))


class SchemaReferenceError(GenerationError):
    """Raised when a field references a model, enum, or scalar that is not known."""

    pass


class OverrideGrammarError(GenerationError):
    """Raised when a type override string cannot be used where it appears.

    This can happen when:
    - A per-field type is not an importable name and not marked literal
    - An import type has no module path and typeImportPath is not set
    """

    pass


class ExternalToolError(GenerationError):
    """Raised when the external formatter is requested but cannot be used."""

    pass
