import json
import unittest
from pathlib import Path
from unittest import TestCase

from protoschema.errors import DuplicateConstantNameError, DuplicateTagError, SchemaError
from protoschema.loader import SchemaLoader
from protoschema.schema_ast import EnumElement, MessageElement, OptionKind, render

TEST_DATA = Path(__file__).parent / "test_data"


def load_description(name):
    with open(TEST_DATA / f"{name}.json") as f:
        return json.load(f)


class TestSchemaLoader(TestCase):
    def test_colors_reference(self):
        proto_file = SchemaLoader().load(load_description("colors"))
        s = render(proto_file)

        with open(TEST_DATA / "colors.proto") as f:
            ref = f.read()
        self.assertEqual(s, ref)

    def test_qualified_names(self):
        proto_file = SchemaLoader().load(load_description("colors"))
        color, palette = proto_file.types

        self.assertIsInstance(color, EnumElement)
        self.assertIsInstance(palette, MessageElement)
        self.assertEqual(color.qualified_name, "pkg.Color")
        self.assertEqual(palette.qualified_name, "pkg.Palette")
        self.assertEqual(palette.nested_elements[0].qualified_name, "pkg.Palette.Shade")

    def test_option_kinds(self):
        proto_file = SchemaLoader().load(load_description("colors"))
        self.assertIs(proto_file.options[0].kind, OptionKind.STRING)
        self.assertIs(proto_file.types[0].options[0].value, True)

    def test_nested_option(self):
        description = {
            "types": [
                {
                    "name": "Color",
                    "options": [
                        {
                            "name": "custom",
                            "kind": "option",
                            "parenthesized": True,
                            "value": {"name": "flag", "kind": "boolean", "value": True},
                        }
                    ],
                }
            ]
        }
        enum = SchemaLoader().load(description).types[0]
        self.assertEqual(enum.qualified_name, "Color")
        self.assertEqual(enum.options[0].to_declaration(), "option (custom).flag = true;\n")

    def test_duplicate_tag(self):
        description = {
            "package": "pkg",
            "types": [{"kind": "enum", "name": "Color", "constants": [{"name": "RED", "tag": 1}, {"name": "CRIMSON", "tag": 1}]}],
        }
        with self.assertRaises(DuplicateTagError) as cm:
            SchemaLoader().load(description)
        self.assertEqual(str(cm.exception), "Duplicate tag 1 in pkg.Color")

    def test_duplicate_constant_in_message_scope(self):
        description = {
            "package": "pkg",
            "types": [
                {
                    "kind": "message",
                    "name": "Palette",
                    "types": [
                        {"kind": "enum", "name": "A", "constants": [{"name": "X", "tag": 0}]},
                        {"kind": "enum", "name": "B", "constants": [{"name": "X", "tag": 0}]},
                    ],
                }
            ],
        }
        with self.assertRaises(DuplicateConstantNameError) as cm:
            SchemaLoader().load(description)
        self.assertEqual(str(cm.exception), "Duplicate enum constant X in scope pkg.Palette")

    def test_unknown_kind(self):
        with self.assertRaises(SchemaError):
            SchemaLoader().load({"types": [{"kind": "service", "name": "Api"}]})


if __name__ == "__main__":
    unittest.main()
