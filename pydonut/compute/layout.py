"""Section-to-arc layout engine.

Turns caller sections plus a total into an ordered list of :class:`Arc`
descriptors. Arcs wider than half the ring are split in two equal halves,
since a single half-circle filler cannot draw more than 180 degrees.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .colors import DEFAULT_COLORS, palette_color
from .core.types import Arc, section_field

logger = logging.getLogger(__name__)

HALF_CIRCLE_DEG = 180.0
FULL_CIRCLE_DEG = 360.0


class InvalidInputError(ValueError):
    """Raised when sections cannot be laid out against the given total."""


def split_arc(sweep_deg: float) -> Tuple[float, float]:
    """Split a sweep into two equal adjacent halves."""
    half = sweep_deg / 2.0
    return half, half


def _section_value(section: Any, index: int) -> float:
    value = section_field(section, "value")
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise InvalidInputError(
            f"Section {index} has a non-numeric value: {value!r}"
        )
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(
            f"Section {index} value must be greater than 0, got {value}"
        )
    return value


def resolve_total(values: Sequence[float], total: Optional[float] = None) -> float:
    """Return the effective total, validating it against the section values.

    Raises:
        InvalidInputError: If the values add up to more than ``total``.
    """
    values_sum = float(np.sum(values)) if len(values) else 0.0
    if total is None:
        return values_sum
    total = float(total)
    if values_sum > total and not math.isclose(values_sum, total):
        raise InvalidInputError(
            f"Sum of all the sections' values ({values_sum:g}) should not exceed "
            f"`total` ({total:g})"
        )
    return total


def normalize_sections(
    sections: Sequence[Any],
    total: Optional[float] = None,
    palette: Tuple[str, ...] = DEFAULT_COLORS,
) -> List[Arc]:
    """Compute the ordered arc list for a list of sections.

    Args:
        sections: Section objects or mappings with a positive ``value`` and
            optional ``color`` / ``label``. They are only read, never written.
        total: Value representing the full ring. Defaults to the sum of the
            section values.
        palette: Colors used, by original section position, for sections
            without an explicit color.

    Returns:
        Arcs in section order. A section spanning more than 180 degrees
        contributes two adjacent arcs with the same ``source_index``.

    Raises:
        InvalidInputError: If a value is not a positive number or the values
            exceed ``total``.
    """
    values = [_section_value(section, idx) for idx, section in enumerate(sections)]
    total = resolve_total(values, total)
    if not values or total <= 0:
        return []

    sweeps = np.asarray(values, dtype=float) / total * FULL_CIRCLE_DEG

    pending: List[Tuple[int, float, str, Optional[str]]] = []
    for idx, (section, sweep) in enumerate(zip(sections, sweeps)):
        color = section_field(section, "color") or palette_color(idx, palette)
        label = section_field(section, "label")
        if sweep > HALF_CIRCLE_DEG:
            logger.debug("splitting section %d (%.2f deg) in two arcs", idx, sweep)
            for half in split_arc(float(sweep)):
                pending.append((idx, half, color, label))
        else:
            pending.append((idx, float(sweep), color, label))

    arc_sweeps = np.array([item[1] for item in pending], dtype=float)
    starts = np.concatenate(([0.0], np.cumsum(arc_sweeps)[:-1]))

    arcs = [
        Arc(
            source_index=idx,
            start_angle_deg=float(start),
            sweep_deg=sweep,
            color=color,
            label=label,
        )
        for (idx, sweep, color, label), start in zip(pending, starts)
    ]
    logger.debug("laid out %d sections as %d arcs", len(sections), len(arcs))
    return arcs
