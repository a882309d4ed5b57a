"""
Exceptions raised while building schema AST nodes.

Every error is fatal to the declaration (or scope) being built: no partial
node is produced and nothing is substituted.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for all schema construction errors."""

    pass


class NullArgumentError(SchemaError, ValueError):
    """Raised when a required argument is None.

    This signals a bug in the caller, not an invalid schema.
    """

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"{param} == None")


class DuplicateTagError(SchemaError):
    """Raised when two constants of one enum share a tag without allow_alias."""

    def __init__(self, tag: int, qualified_name: str):
        self.tag = tag
        self.qualified_name = qualified_name
        super().__init__(f"Duplicate tag {tag} in {qualified_name}")


class DuplicateConstantNameError(SchemaError):
    """Raised when two enums of the same scope declare a constant with the same name.

    Enum constants are siblings of their enum (C++ scoping), so names must be
    unique across every enum declared directly in one scope.
    """

    def __init__(self, name: str, scope: str):
        self.name = name
        self.scope = scope
        super().__init__(f"Duplicate enum constant {name} in scope {scope}")


class DuplicateOptionError(SchemaError):
    """Raised when an option lookup by name finds more than one match."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Multiple options match name: {name}")


class OptionValueError(SchemaError, TypeError):
    """Raised when an option value does not fit its declared kind."""

    def __init__(self, name: str, kind: str, value: object):
        self.name = name
        self.kind = kind
        self.value = value
        super().__init__(f"Option {name} of kind {kind} has invalid value {value!r}")


class TagValueError(SchemaError, TypeError):
    """Raised when an enum constant tag is not an integer."""

    def __init__(self, name: str, tag: object):
        self.name = name
        self.tag = tag
        super().__init__(f"Enum constant {name} has non-integer tag {tag!r}")
