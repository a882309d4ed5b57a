"""
Immutable AST for `.proto` schema declarations.
"""

from __future__ import annotations

from .nodes import (
    EnumConstantElement,
    EnumElement,
    MessageElement,
    ProtoFileElement,
    TypeElement,
    validate_value_uniqueness_in_scope,
)
from .options import OptionElement, OptionKind, find_by_name
from .renderer import SchemaRenderer, render

__all__ = [
    "EnumConstantElement",
    "EnumElement",
    "MessageElement",
    "OptionElement",
    "OptionKind",
    "ProtoFileElement",
    "SchemaRenderer",
    "TypeElement",
    "find_by_name",
    "render",
    "validate_value_uniqueness_in_scope",
]
