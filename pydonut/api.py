"""High-level public API for pydonut.

- `layout`: computes the ordered arc list for a set of sections.
- `render`: builds a chart and returns its HTML together with the arcs.
- `sections_from_frame`: turns a pandas DataFrame into section mappings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from .compute.core.types import Arc
from .compute.layout import normalize_sections
from .config import ChartConfig
from .render.donut_chart import DonutChart

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd  # type: ignore


@dataclass
class Chart:
    """Container for a rendered chart and its arc layout.

    Attributes:
        html: Self-contained HTML fragment of the chart.
        arcs: Arcs the chart was drawn from, in drawing order.
    """

    html: str
    arcs: List[Arc] = field(default_factory=list)

    def save_html(self, path: str) -> None:
        """Write the HTML fragment to disk.

        Args:
            path: Destination file path. Parent directories must exist.
        """
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.html)

    def to_frame(self) -> "pd.DataFrame":
        """Return the arcs as a DataFrame, one row per arc."""
        import pandas as pd

        columns = ["source_index", "start_angle_deg", "sweep_deg", "color", "label"]
        return pd.DataFrame([asdict(arc) for arc in self.arcs], columns=columns)

    def _repr_html_(self) -> str:  # pragma: no cover - visual
        return self.html


def layout(sections: Sequence[Any], total: Optional[float] = None) -> List[Arc]:
    """Compute the arc layout of ``sections``.

    Raises:
        InvalidInputError: If a value is not positive or the values exceed
            ``total``.
    """
    return normalize_sections(sections, total)


def render(
    sections: Sequence[Any],
    config: Optional[ChartConfig] = None,
    total: Optional[float] = None,
    content: Optional[str] = None,
) -> Chart:
    """Render a ring chart to HTML.

    Args:
        sections: Sections or mappings with ``value`` and optional ``color``,
            ``label`` and ``name``.
        config: Presentation props; defaults to :class:`ChartConfig`.
        total: Value of the full ring; defaults to the sum of values.
        content: Optional HTML placed in the center instead of ``config.text``.

    Returns:
        A :class:`Chart` with the HTML and the arcs.
    """
    chart = DonutChart(sections, total=total, config=config, content=content)
    chart.recalc_font_size()
    return Chart(html=chart.render_html(), arcs=list(chart.arcs))


def sections_from_frame(
    df: "pd.DataFrame",
    value: str = "value",
    label: Optional[str] = None,
    color: Optional[str] = None,
    name: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Build section mappings from DataFrame columns.

    Missing labels and colors are left out so the defaults apply.

    Raises:
        KeyError: If a named column does not exist.
    """
    import pandas as pd

    wanted = {"value": value, "label": label, "color": color, "name": name}
    missing = [col for col in wanted.values() if col is not None and col not in df.columns]
    if missing:
        raise KeyError(f"Column(s) not found: {', '.join(missing)}")

    sections: List[Dict[str, Any]] = []
    for _, row in df.iterrows():
        section: Dict[str, Any] = {"value": float(row[value])}
        for key in ("label", "color", "name"):
            col = wanted[key]
            if col is None or pd.isna(row[col]):
                continue
            section[key] = str(row[col]) if key != "name" else row[col]
        sections.append(section)
    return sections
