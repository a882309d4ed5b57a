"""
Configuration for rendering schema files.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration options for rendering."""

    # One level of indentation for nested blocks (canonical output uses two spaces)
    indent: str = "  "

    # Add generation comment at top of file
    add_generation_comment: bool = False

    @staticmethod
    def from_dict(d: dict) -> RenderConfig:
        """Create a config from a dictionary."""
        config = RenderConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "indent": self.indent,
            "add_generation_comment": self.add_generation_comment,
        }
