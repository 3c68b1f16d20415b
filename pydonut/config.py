from __future__ import annotations

"""Chart configuration.

Holds the presentation props of a ring chart. Sections and the total live on
the chart itself since they drive the layout, not the styling.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Optional

LEGEND_PLACEMENTS = ("top", "right", "bottom", "left")


@dataclass
class ChartConfig:
    """Presentation options of a ring chart.

    Attributes:
        size: Ring width and height, expressed in ``unit``.
        unit: CSS length unit for ``size`` (``px``, ``%``, ``em``...).
        thickness: Ring thickness as a percentage of the radius (0-100).
        background: Color of the center overlay.
        foreground: Color of the empty part of the ring.
        text: Center label, used when no custom content is given.
        has_legend: Whether the default legend is rendered.
        legend_placement: Side of the ring the legend sits on.
        start_angle: Rotation of the whole arc layout, in degrees.
        section_hover_class: Class added to hovered arcs and legend items.
        logger: Optional logger; modules fall back to their own.
        log_level: Level applied to ``logger`` when one is given.
    """

    size: float = 250
    unit: str = "px"
    thickness: float = 20
    background: str = "#ffffff"
    foreground: str = "#eeeeee"
    text: Optional[str] = None
    has_legend: bool = False
    legend_placement: str = "top"
    start_angle: float = 0
    section_hover_class: str = "cdc-section-hover"
    # Logging
    logger: Optional[logging.Logger] = None
    log_level: int = logging.INFO

    def validate(self) -> "ChartConfig":
        """Check prop ranges.

        Raises:
            ValueError: If ``size``, ``thickness`` or ``legend_placement`` is
                out of range.
        """
        if not self.size or self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if not 0 <= self.thickness <= 100:
            raise ValueError(f"thickness must be between 0 and 100, got {self.thickness}")
        if self.legend_placement not in LEGEND_PLACEMENTS:
            raise ValueError(
                f"legend_placement must be one of {', '.join(LEGEND_PLACEMENTS)}, "
                f"got {self.legend_placement!r}"
            )
        return self

    def get_logger(self, name: str) -> logging.Logger:
        if self.logger is not None:
            self.logger.setLevel(self.log_level)
            return self.logger
        return logging.getLogger(name)

    @classmethod
    def from_options(cls, opts: Any) -> "ChartConfig":
        """Build a config from any object exposing the same attribute names.

        Missing or ``None`` attributes keep their defaults, so an
        ``argparse.Namespace`` can be passed straight in.
        """
        values = {}
        for f in fields(cls):
            v = getattr(opts, f.name, None)
            if v is not None:
                values[f.name] = v
        return cls(**values)
