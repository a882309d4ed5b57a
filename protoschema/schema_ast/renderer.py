"""
Schema AST renderer.

Converts AST nodes back to canonical `.proto` source text:
- Documentation as leading `//` comment lines
- Two-space indentation, applied to every line of a nested block
- Options block before constants (or nested types), separated by a blank line
- Empty blocks are omitted entirely
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..config import RenderConfig
from .nodes import EnumElement, MessageElement, ProtoFileElement, TypeElement
from .utils import append_documentation, indent_block


class SchemaRenderer:
    """Renders schema AST nodes to source text."""

    def __init__(self, config: RenderConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration (defaults to canonical output)
        """
        self.config = config or RenderConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.declaration_template = self.jinja_env.get_template("declaration.proto.jinja2")
        self.file_template = self.jinja_env.get_template("file.proto.jinja2")

    def render(self, element: TypeElement | ProtoFileElement) -> str:
        """Render a declaration or a whole file."""
        match element:
            case EnumElement():
                return self.render_enum(element)
            case MessageElement():
                return self.render_message(element)
            case ProtoFileElement():
                return self.render_file(element)
        raise TypeError(f"Cannot render {type(element).__name__}")

    def render_enum(self, enum: EnumElement) -> str:
        blocks = [
            self._indent_all(option.to_declaration() for option in enum.options),
            self._indent_all(constant.to_schema() for constant in enum.constants),
        ]
        return self._render_declaration("enum", enum.name, enum.documentation, blocks)

    def render_message(self, message: MessageElement) -> str:
        blocks = [
            self._indent_all(option.to_declaration() for option in message.options),
            self._indent_all(self.render(nested) for nested in message.nested_elements),
        ]
        return self._render_declaration("message", message.name, message.documentation, blocks)

    def render_file(self, file: ProtoFileElement, generation_comment: str = "") -> str:
        header: list[str] = []
        append_documentation(header, generation_comment)

        preamble: list[str] = []
        if file.file_path:
            preamble.append(f"// {file.file_path}\n")
        if file.package_name:
            preamble.append(f"package {file.package_name};\n")

        # Non-empty sections are separated by one blank line
        sections = [
            "".join(header),
            "".join(preamble),
            "".join(option.to_declaration() for option in file.options),
            "".join(self.render(element) for element in file.types),
        ]
        return self.file_template.render(sections=[section for section in sections if section])

    def _render_declaration(self, keyword: str, name: str, documentation: str, blocks: list[str]) -> str:
        doc: list[str] = []
        append_documentation(doc, documentation)
        return self.declaration_template.render(
            documentation="".join(doc),
            keyword=keyword,
            name=name,
            blocks=[block for block in blocks if block],
        )

    def _indent_all(self, values) -> str:
        return "".join(indent_block(value, self.config.indent) for value in values)


def render(element: TypeElement | ProtoFileElement) -> str:
    """Render an element with the canonical configuration."""
    return SchemaRenderer().render(element)
