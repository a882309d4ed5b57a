"""
AST node definitions for `.proto` schema declarations.

Nodes are immutable: every check runs once, when the node is built, so any
node that exists is well-formed. Collections passed in are copied into
tuples, so later changes to the caller's lists never leak into the tree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import DuplicateConstantNameError, DuplicateTagError, TagValueError
from .options import ALLOW_ALIAS, OptionElement, find_by_name, is_allow_alias
from .utils import append_documentation, append_options, check_not_null

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumConstantElement:
    """Represents one named, tagged member of an enum (e.g., `RED = 1;`)."""

    name: str
    tag: int
    documentation: str = ""
    options: tuple[OptionElement, ...] = ()

    def __post_init__(self):
        check_not_null(self.name, "name")
        check_not_null(self.tag, "tag")
        if not isinstance(self.tag, int) or isinstance(self.tag, bool):
            raise TagValueError(self.name, self.tag)
        check_not_null(self.documentation, "documentation")
        object.__setattr__(self, "options", tuple(check_not_null(self.options, "options")))

    def to_schema(self) -> str:
        result: list[str] = []
        append_documentation(result, self.documentation)
        result.append(f"{self.name} = {self.tag}")
        if self.options:
            result.append(" ")
            append_options(result, self.options)
        result.append(";\n")
        return "".join(result)


@dataclass(frozen=True)
class EnumElement:
    """Represents an enum declaration.

    Enum declarations are leaves: `nested_elements` is always empty.
    Unless an `allow_alias = true` option is present, constant tags must be
    pairwise distinct.

    Raises:
        NullArgumentError: if any argument is None
        DuplicateTagError: if two constants share a tag without allow_alias
    """

    name: str
    qualified_name: str
    documentation: str
    options: tuple[OptionElement, ...]
    constants: tuple[EnumConstantElement, ...]

    def __post_init__(self):
        check_not_null(self.name, "name")
        check_not_null(self.qualified_name, "qualified_name")
        check_not_null(self.documentation, "documentation")
        options = tuple(check_not_null(self.options, "options"))
        constants = tuple(check_not_null(self.constants, "constants"))

        if _parse_allow_alias(options):
            # Aliased enums skip the tag check entirely.
            logger.debug("Aliasing permitted in %s, skipping tag check", self.qualified_name)
        else:
            _validate_tag_uniqueness(self.qualified_name, constants)

        object.__setattr__(self, "options", options)
        object.__setattr__(self, "constants", constants)

    @classmethod
    def create(
        cls,
        name: str,
        qualified_name: str,
        documentation: str,
        options: Sequence[OptionElement],
        constants: Sequence[EnumConstantElement],
    ) -> EnumElement:
        """Build a validated enum declaration."""
        return cls(name, qualified_name, documentation, options, constants)

    @property
    def nested_elements(self) -> tuple[TypeElement, ...]:
        # Enums do not allow nested type declarations.
        return ()


@dataclass(frozen=True)
class MessageElement:
    """Represents a message declaration acting as a scope for nested types.

    Field declarations are not modelled. Constants of the enums nested
    directly in a message share that message's namespace.

    Raises:
        NullArgumentError: if any argument is None
        DuplicateConstantNameError: if two nested enums declare the same constant name
    """

    name: str
    qualified_name: str
    documentation: str = ""
    options: tuple[OptionElement, ...] = ()
    nested_elements: tuple[TypeElement, ...] = ()

    def __post_init__(self):
        check_not_null(self.name, "name")
        check_not_null(self.qualified_name, "qualified_name")
        check_not_null(self.documentation, "documentation")
        options = tuple(check_not_null(self.options, "options"))
        nested_elements = tuple(check_not_null(self.nested_elements, "nested_elements"))

        validate_value_uniqueness_in_scope(self.qualified_name, nested_elements)

        object.__setattr__(self, "options", options)
        object.__setattr__(self, "nested_elements", nested_elements)


TypeElement = EnumElement | MessageElement


@dataclass(frozen=True)
class ProtoFileElement:
    """Represents a complete `.proto` file, the outermost scope."""

    file_path: str = ""
    package_name: str = ""
    options: tuple[OptionElement, ...] = ()
    types: tuple[TypeElement, ...] = ()

    def __post_init__(self):
        check_not_null(self.file_path, "file_path")
        check_not_null(self.package_name, "package_name")
        options = tuple(check_not_null(self.options, "options"))
        types = tuple(check_not_null(self.types, "types"))

        validate_value_uniqueness_in_scope(self.package_name, types)

        object.__setattr__(self, "options", options)
        object.__setattr__(self, "types", types)


def _parse_allow_alias(options: Sequence[OptionElement]) -> bool:
    return is_allow_alias(find_by_name(options, ALLOW_ALIAS))


def _validate_tag_uniqueness(qualified_name: str, constants: Sequence[EnumConstantElement]) -> None:
    tags: set[int] = set()
    for constant in constants:
        if constant.tag in tags:
            raise DuplicateTagError(constant.tag, qualified_name)
        tags.add(constant.tag)


def validate_value_uniqueness_in_scope(qualified_name: str, nested_elements: Sequence[TypeElement]) -> None:
    """
    Check that enum constant names are unique across one scope.

    Enum names use C++ scoping rules: constants are siblings of their
    declaring enum, not children of it, so every enum declared directly in
    a scope shares one namespace for constant names.

    Args:
        qualified_name: Qualified name of the enclosing scope (for errors)
        nested_elements: All type declarations directly inside the scope

    Raises:
        DuplicateConstantNameError: on the first repeated constant name
    """
    check_not_null(qualified_name, "qualified_name")
    check_not_null(nested_elements, "nested_elements")

    names: set[str] = set()
    for element in nested_elements:
        match element:
            case EnumElement(constants=constants):
                for constant in constants:
                    if constant.name in names:
                        raise DuplicateConstantNameError(constant.name, qualified_name)
                    names.add(constant.name)
