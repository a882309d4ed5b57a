"""
Loader that builds a schema AST from a JSON description.

The description holds already-tokenized declarations:

    {
        "file_path": "colors.proto",
        "package": "pkg",
        "options": [{"name": "java_package", "kind": "string", "value": "com.pkg"}],
        "types": [
            {
                "kind": "enum",
                "name": "Color",
                "documentation": "Primary colors.",
                "options": [{"name": "allow_alias", "kind": "boolean", "value": true}],
                "constants": [{"name": "RED", "tag": 1}]
            },
            {"kind": "message", "name": "Palette", "types": [...]}
        ]
    }

Nodes are built bottom-up, so every scope is validated once all of its
nested declarations are known.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import SchemaError
from .schema_ast.nodes import (
    EnumConstantElement,
    EnumElement,
    MessageElement,
    ProtoFileElement,
    TypeElement,
)
from .schema_ast.options import OptionElement, OptionKind

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Builds schema AST nodes from a JSON description."""

    def load(self, description: dict[str, Any]) -> ProtoFileElement:
        """
        Build a file element from a JSON description.

        Args:
            description: The parsed JSON description

        Returns:
            ProtoFileElement with all declarations validated

        Raises:
            SchemaError: if any declaration or scope is invalid
        """
        package_name = description.get("package", "")
        types = [self._load_type(t, package_name) for t in description.get("types", [])]
        logger.debug("Loaded %d top-level types for package %r", len(types), package_name)
        return ProtoFileElement(
            file_path=description.get("file_path", ""),
            package_name=package_name,
            options=self._load_options(description.get("options", [])),
            types=types,
        )

    def _load_type(self, description: dict[str, Any], scope: str) -> TypeElement:
        name = description["name"]
        qualified_name = f"{scope}.{name}" if scope else name
        kind = description.get("kind", "enum")

        if kind == "enum":
            constants = [self._load_constant(c) for c in description.get("constants", [])]
            logger.debug("Building enum %s with %d constants", qualified_name, len(constants))
            return EnumElement.create(
                name,
                qualified_name,
                description.get("documentation", ""),
                self._load_options(description.get("options", [])),
                constants,
            )
        if kind == "message":
            nested = [self._load_type(t, qualified_name) for t in description.get("types", [])]
            logger.debug("Building message %s with %d nested types", qualified_name, len(nested))
            return MessageElement(
                name=name,
                qualified_name=qualified_name,
                documentation=description.get("documentation", ""),
                options=self._load_options(description.get("options", [])),
                nested_elements=nested,
            )
        raise SchemaError(f"Unknown declaration kind {kind!r} for {qualified_name}")

    def _load_constant(self, description: dict[str, Any]) -> EnumConstantElement:
        return EnumConstantElement(
            name=description["name"],
            tag=description["tag"],
            documentation=description.get("documentation", ""),
            options=self._load_options(description.get("options", [])),
        )

    def _load_options(self, descriptions: list[dict[str, Any]]) -> list[OptionElement]:
        return [self._load_option(d) for d in descriptions]

    def _load_option(self, description: dict[str, Any]) -> OptionElement:
        kind = OptionKind(description["kind"])
        value = description["value"]
        if kind == OptionKind.OPTION:
            value = self._load_option(value)
        return OptionElement(
            name=description["name"],
            kind=kind,
            value=value,
            is_parenthesized=description.get("parenthesized", False),
        )
