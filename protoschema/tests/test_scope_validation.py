"""
Tests for enum constant name uniqueness across a scope.

Enum constants are siblings of their enum, so two enums declared in the
same scope cannot both declare a constant with the same name.
"""

from __future__ import annotations

import pytest

from protoschema.errors import DuplicateConstantNameError
from protoschema.schema_ast import (
    EnumConstantElement,
    EnumElement,
    MessageElement,
    ProtoFileElement,
    validate_value_uniqueness_in_scope,
)


def make_enum(name: str, *constant_names: str, scope: str = "pkg") -> EnumElement:
    constants = [EnumConstantElement(c, i) for i, c in enumerate(constant_names)]
    return EnumElement.create(name, f"{scope}.{name}", "", [], constants)


def test_duplicate_name_across_sibling_enums():
    a = make_enum("A", "X")
    b = make_enum("B", "X")

    with pytest.raises(DuplicateConstantNameError) as excinfo:
        validate_value_uniqueness_in_scope("pkg", [a, b])

    assert excinfo.value.name == "X"
    assert excinfo.value.scope == "pkg"
    assert "X" in str(excinfo.value)
    assert "pkg" in str(excinfo.value)


def test_renaming_constant_resolves_conflict():
    a = make_enum("A", "X")
    b = make_enum("B", "Y")

    validate_value_uniqueness_in_scope("pkg", [a, b])


def test_first_repeated_name_reported():
    a = make_enum("A", "X", "Y")
    b = make_enum("B", "Y", "X")

    with pytest.raises(DuplicateConstantNameError) as excinfo:
        validate_value_uniqueness_in_scope("pkg", [a, b])

    assert excinfo.value.name == "Y"


def test_empty_scope():
    validate_value_uniqueness_in_scope("pkg", [])


def test_messages_do_not_contribute_constants():
    inner = make_enum("Inner", "X", scope="pkg.Outer")
    outer = MessageElement("Outer", "pkg.Outer", nested_elements=[inner])
    sibling = make_enum("Sibling", "X")

    validate_value_uniqueness_in_scope("pkg", [outer, sibling])


def test_message_validates_its_nested_enums():
    a = make_enum("A", "X", scope="pkg.Outer")
    b = make_enum("B", "X", scope="pkg.Outer")

    with pytest.raises(DuplicateConstantNameError) as excinfo:
        MessageElement("Outer", "pkg.Outer", nested_elements=[a, b])

    assert excinfo.value.scope == "pkg.Outer"


def test_file_validates_top_level_enums():
    a = make_enum("A", "RED")
    b = make_enum("B", "RED")

    with pytest.raises(DuplicateConstantNameError) as excinfo:
        ProtoFileElement(package_name="pkg", types=[a, b])

    assert excinfo.value.name == "RED"
    assert excinfo.value.scope == "pkg"


def test_repeated_name_within_one_enum():
    enum = make_enum("A", "X", "X")

    with pytest.raises(DuplicateConstantNameError):
        validate_value_uniqueness_in_scope("pkg", [enum])
