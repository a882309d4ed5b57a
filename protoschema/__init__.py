"""protoschema

An immutable AST for `.proto` schema declarations. Enum declarations are
validated when built (tag uniqueness, scoped constant names) and render back
to canonical source text.
"""

__version__ = "0.1.0"

from .config import RenderConfig
from .errors import (
    DuplicateConstantNameError,
    DuplicateOptionError,
    DuplicateTagError,
    NullArgumentError,
    OptionValueError,
    SchemaError,
    TagValueError,
)
from .loader import SchemaLoader
from .schema_ast import (
    EnumConstantElement,
    EnumElement,
    MessageElement,
    OptionElement,
    OptionKind,
    ProtoFileElement,
    SchemaRenderer,
    render,
    validate_value_uniqueness_in_scope,
)

__all__ = [
    "EnumConstantElement",
    "EnumElement",
    "MessageElement",
    "OptionElement",
    "OptionKind",
    "ProtoFileElement",
    "RenderConfig",
    "SchemaLoader",
    "SchemaRenderer",
    "render",
    "validate_value_uniqueness_in_scope",
    "SchemaError",
    "NullArgumentError",
    "DuplicateTagError",
    "DuplicateConstantNameError",
    "DuplicateOptionError",
    "OptionValueError",
    "TagValueError",
]
