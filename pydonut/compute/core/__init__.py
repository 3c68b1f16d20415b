"""Core types for the layout engine."""

from .types import Arc, Section, section_field

__all__ = ["Arc", "Section", "section_field"]
