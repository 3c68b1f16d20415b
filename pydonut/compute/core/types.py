"""Type definitions for the compute module.

This module defines the input and derived data types used by the layout
engine: caller-supplied sections and the arcs computed from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, Optional


@dataclass
class Section:
    """A caller-supplied weighted slice of the chart.

    Plain mappings with the same keys are accepted everywhere a ``Section``
    is, so callers are free to pass dicts loaded from JSON.

    Attributes:
        value: Weight of the section. Must be strictly positive.
        color: Optional hex color; a palette color is used when omitted.
        label: Optional label shown as the arc title and in the legend.
        name: Arbitrary caller data, carried untouched.
    """

    value: float
    color: Optional[str] = None
    label: Optional[str] = None
    name: Any = None


@dataclass(frozen=True)
class Arc:
    """A renderable segment of the ring.

    Attributes:
        source_index: Position of the originating section in the input list.
            Both halves of a split section share it.
        start_angle_deg: Start of the arc, measured from 0 before any
            ``start_angle`` rotation is applied.
        sweep_deg: Angular width of the arc, never above 180.
        color: Resolved color (explicit or palette default).
        label: The section's label, if any.
    """

    source_index: int
    start_angle_deg: float
    sweep_deg: float
    color: str
    label: Optional[str] = None

    @property
    def end_angle_deg(self) -> float:
        return self.start_angle_deg + self.sweep_deg


def section_field(section: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping-like or attribute-style section."""
    if isinstance(section, Mapping):
        return section.get(key, default)
    return getattr(section, key, default)
