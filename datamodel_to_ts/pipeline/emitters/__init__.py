"""
Declaration emitters.
"""

from __future__ import annotations

from .base import TemplateEmitter
from .enum_emitter import EnumEmitter
from .model_emitter import COUNT_FIELD_NAME, ModelEmitter, ResolvedField

__all__ = [
    "TemplateEmitter",
    "EnumEmitter",
    "ModelEmitter",
    "ResolvedField",
    "COUNT_FIELD_NAME",
]
