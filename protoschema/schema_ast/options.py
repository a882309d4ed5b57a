"""
Option node definitions.

An option is a name/value annotation attached to files, declarations and
enum constants. Values belong to a small closed set of kinds.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import DuplicateOptionError, OptionValueError
from .utils import append_indented, check_not_null

ALLOW_ALIAS = "allow_alias"


class OptionKind(str, Enum):
    """Kind of value held by an option."""

    STRING = "string"  # name = "value"
    BOOLEAN = "boolean"  # name = true
    NUMBER = "number"  # name = 42
    ENUM = "enum"  # name = IDENTIFIER
    MAP = "map"  # name = { key: value }
    LIST = "list"  # name = [ value, ... ]
    OPTION = "option"  # name.nested = value


class OptionMap(Mapping):
    """Read-only, hashable mapping holding the value of a MAP option."""

    def __init__(self, items: Mapping[str, Any]):
        self._items = dict(items)

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"OptionMap({self._items!r})"


def _freeze(value: Any) -> Any:
    """Copy nested maps and lists into read-only containers."""
    if isinstance(value, Mapping):
        return OptionMap({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(_freeze(item) for item in value)
    return value


@dataclass(frozen=True)
class OptionElement:
    """Represents a single option (e.g., `option allow_alias = true;`)."""

    name: str
    kind: OptionKind
    value: Any
    is_parenthesized: bool = False

    def __post_init__(self):
        check_not_null(self.name, "name")
        check_not_null(self.kind, "kind")
        check_not_null(self.value, "value")
        object.__setattr__(self, "kind", OptionKind(self.kind))

        match self.kind:
            case OptionKind.BOOLEAN:
                valid = isinstance(self.value, bool)
            case OptionKind.STRING | OptionKind.ENUM:
                valid = isinstance(self.value, str)
            case OptionKind.NUMBER:
                valid = isinstance(self.value, (int, float, str)) and not isinstance(self.value, bool)
            case OptionKind.MAP:
                valid = isinstance(self.value, Mapping)
                if valid:
                    object.__setattr__(self, "value", _freeze(self.value))
            case OptionKind.LIST:
                valid = isinstance(self.value, Sequence) and not isinstance(self.value, str)
                if valid:
                    object.__setattr__(self, "value", _freeze(self.value))
            case OptionKind.OPTION:
                valid = isinstance(self.value, OptionElement)

        if not valid:
            raise OptionValueError(self.name, self.kind.value, self.value)

    @property
    def formatted_name(self) -> str:
        return f"({self.name})" if self.is_parenthesized else self.name

    def to_schema(self) -> str:
        """Convert to the option text used inside declarations and brackets."""
        match self.kind:
            case OptionKind.STRING:
                return f"{self.formatted_name} = {_quote(self.value)}"
            case OptionKind.BOOLEAN:
                return f"{self.formatted_name} = {_format_value(self.value)}"
            case OptionKind.NUMBER | OptionKind.ENUM:
                return f"{self.formatted_name} = {self.value}"
            case OptionKind.OPTION:
                return f"{self.formatted_name}.{self.value.to_schema()}"
            case OptionKind.MAP:
                return f"{self.formatted_name} = {_format_map(self.value)}"
            case OptionKind.LIST:
                return f"{self.formatted_name} = {_format_list(self.value)}"

    def to_declaration(self) -> str:
        """Convert to a standalone `option ...;` statement."""
        return f"option {self.to_schema()};\n"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _format_value(value: Any) -> str:
    """Format a value nested inside a map or list option."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, OptionElement):
        return value.to_schema()
    if isinstance(value, Mapping):
        return _format_map(value)
    if isinstance(value, Sequence):
        return _format_list(value)
    return str(value)


def _format_map(value: Mapping[str, Any]) -> str:
    result = ["{\n"]
    items = list(value.items())
    for i, (key, item) in enumerate(items):
        endl = "," if i < len(items) - 1 else ""
        append_indented(result, f"{key}: {_format_value(item)}{endl}")
    result.append("}")
    return "".join(result)


def _format_list(value: Sequence[Any]) -> str:
    result = ["[\n"]
    for i, item in enumerate(value):
        endl = "," if i < len(value) - 1 else ""
        append_indented(result, f"{_format_value(item)}{endl}")
    result.append("]")
    return "".join(result)


def find_by_name(options: Sequence[OptionElement], name: str) -> OptionElement | None:
    """Return the option called name, or None if there is none.

    Raises:
        DuplicateOptionError: if more than one option has that name
    """
    check_not_null(options, "options")
    check_not_null(name, "name")

    found = None
    for option in options:
        if option.name == name:
            if found is not None:
                raise DuplicateOptionError(name)
            found = option
    return found


def is_allow_alias(option: OptionElement | None) -> bool:
    """Check whether option permits aliased enum tags."""
    match option:
        case OptionElement(name="allow_alias", kind=OptionKind.BOOLEAN, value=True):
            return True
    return False
