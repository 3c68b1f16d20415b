"""Legend items and legend placement styles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..compute.colors import DEFAULT_COLORS, palette_color
from ..compute.core.types import section_field

# Flex styles for the chart container and the legend, per legend placement.
PLACEMENT_STYLES: Dict[str, Dict[str, Dict[str, str]]] = {
    "top": {
        "container": {"flex-direction": "column"},
        "legend": {"order": "-1", "margin": "0", "margin-bottom": "1em"},
    },
    "right": {
        "container": {},
        "legend": {"flex-direction": "column", "margin": "0", "margin-left": "1em"},
    },
    "bottom": {
        "container": {"flex-direction": "column"},
        "legend": {"margin": "0", "margin-top": "1em"},
    },
    "left": {
        "container": {},
        "legend": {
            "flex-direction": "column",
            "order": "-1",
            "margin": "0",
            "margin-right": "1em",
        },
    },
}


def placement_styles(placement: str) -> Dict[str, Dict[str, str]]:
    """Return a copy of the container/legend styles for ``placement``."""
    styles = PLACEMENT_STYLES[placement]
    return {part: dict(props) for part, props in styles.items()}


def default_label(index: int) -> str:
    return f"Section {index + 1}"


@dataclass(frozen=True)
class LegendItem:
    index: int
    label: str
    color: str


def legend_items(
    sections: Sequence[Any], palette: Tuple[str, ...] = DEFAULT_COLORS
) -> List[LegendItem]:
    """One legend entry per section, with label and color defaults plugged in."""
    items = []
    for idx, section in enumerate(sections):
        label: Optional[str] = section_field(section, "label")
        color: Optional[str] = section_field(section, "color")
        items.append(
            LegendItem(
                index=idx,
                label=label or default_label(idx),
                color=color or palette_color(idx, palette),
            )
        )
    return items
