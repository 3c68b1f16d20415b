"""Rendering components for ring charts."""

from .donut_chart import SECTION_CLICK, DonutChart
from .legend import PLACEMENT_STYLES, LegendItem, legend_items, placement_styles

__all__ = [
    "DonutChart",
    "SECTION_CLICK",
    "LegendItem",
    "legend_items",
    "placement_styles",
    "PLACEMENT_STYLES",
]
