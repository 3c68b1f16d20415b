"""pydonut package exports.

Preferred high-level API:
    from pydonut import render, layout, ChartConfig
"""

__version__ = "0.1.0"

from .api import Chart, layout, render, sections_from_frame
from .compute import Arc, InvalidInputError, Section, normalize_sections, split_arc
from .config import ChartConfig
from .interaction import HoverCoordinator, ResizeChannel, ResponsiveTextSizer
from .render import SECTION_CLICK, DonutChart
