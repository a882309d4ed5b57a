"""
Text helpers shared by the schema AST nodes and the renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import NullArgumentError

if TYPE_CHECKING:
    from .options import OptionElement

INDENT = "  "


def check_not_null(value: Any, param: str) -> Any:
    """Return value unchanged, raising NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(param)
    return value


def append_documentation(result: list[str], documentation: str) -> None:
    """Append documentation as `//` comment lines."""
    if not documentation:
        return
    lines = documentation.split("\n")
    # Trailing empty lines are not rendered
    while lines and not lines[-1]:
        lines.pop()
    for line in lines:
        result.append(f"// {line}\n")


def append_indented(result: list[str], value: str, indent: str = INDENT) -> None:
    """Append every line of value with one level of indentation.

    Each appended line ends with a newline; a trailing newline in value does
    not produce an extra empty line.
    """
    lines = value.split("\n")
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    for line in lines:
        result.append(f"{indent}{line}\n")


def indent_block(value: str, indent: str = INDENT) -> str:
    """Indent every line of value, returning the block as one string."""
    result: list[str] = []
    append_indented(result, value, indent)
    return "".join(result)


def append_options(result: list[str], options: tuple[OptionElement, ...]) -> None:
    """Append a bracketed option list, as used after enum constants and fields.

    A single option stays on one line; several options go in an indented
    block, one per line, separated by commas.
    """
    count = len(options)
    if count == 1:
        result.append(f"[{options[0].to_schema()}]")
        return
    result.append("[\n")
    for i, option in enumerate(options):
        endl = "," if i < count - 1 else ""
        append_indented(result, option.to_schema() + endl)
    result.append("]")
