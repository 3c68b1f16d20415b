"""Layout computation for ring charts."""

from .colors import DEFAULT_COLORS, palette_color
from .core.types import Arc, Section
from .layout import InvalidInputError, normalize_sections, split_arc

__all__ = [
    "Arc",
    "Section",
    "DEFAULT_COLORS",
    "palette_color",
    "InvalidInputError",
    "normalize_sections",
    "split_arc",
]
