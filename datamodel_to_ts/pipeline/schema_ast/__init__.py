"""
Schema AST module.

Contains the datamodel node definitions and the DMMF parser.
"""

from __future__ import annotations

from .nodes import Datamodel, EnumNode, FieldKind, FieldNode, ModelNode
from .parser import DatamodelParser, parse_datamodel

__all__ = [
    "Datamodel",
    "EnumNode",
    "FieldKind",
    "FieldNode",
    "ModelNode",
    "DatamodelParser",
    "parse_datamodel",
]
