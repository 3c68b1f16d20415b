"""Ring (donut) chart component.

``DonutChart`` owns the state of one rendered chart: the arc layout, the
hover flags shared by arcs and legend, the center font size and the
``section-click`` listeners. ``render_html`` turns that state into markup
where each arc is a rotated half-circle filler.
"""

from __future__ import annotations

import html as _html
from contextlib import contextmanager
from dataclasses import fields, replace
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from ..compute.core.types import Arc, section_field
from ..compute.layout import normalize_sections
from ..config import ChartConfig
from ..interaction.hover import HoverCoordinator
from ..interaction.resize import ResizeChannel, ResponsiveTextSizer, SizerState
from .format_utils import css_length, css_rotate, css_style, fmt_num
from .legend import legend_items, placement_styles

SECTION_CLICK = "section-click"

_CONFIG_FIELDS = frozenset(f.name for f in fields(ChartConfig))
_FONT_PROPS = frozenset({"size", "unit"})

DEFAULT_CSS = """
.cdc-container { display: flex; align-items: center; justify-content: center; }
.cdc { position: relative; height: 0; border-radius: 50%; overflow: hidden; }
.cdc-sections, .cdc-overlay { position: absolute; top: 0; left: 0; right: 0; bottom: 0; }
.cdc-overlay { margin: auto; border-radius: 50%; display: flex; align-items: center; justify-content: center; }
.cdc-section { position: absolute; top: 0; left: 50%; width: 50%; height: 100%; overflow: hidden; transform-origin: 0% 50%; }
.cdc-filler { position: absolute; top: 0; left: -100%; width: 100%; height: 100%; border-radius: 100% 0 0 100% / 50% 0 0 50%; transform-origin: 100% 50%; }
.cdc-legend { display: flex; flex-wrap: wrap; justify-content: center; }
.cdc-legend-item { display: inline-flex; align-items: center; margin: 0.5em; }
.cdc-legend-item-color { width: 1em; height: 1em; border-radius: 50%; margin-right: 0.5em; }
"""


class DonutChart:
    """Stateful ring chart.

    Args:
        sections: Sections or mappings with ``value`` and optional ``color``,
            ``label`` and ``name``. The objects are never modified.
        total: Value of the full ring; defaults to the sum of section values.
        config: Presentation props; see :class:`~pydonut.config.ChartConfig`.
        content: Custom HTML placed in the center instead of ``config.text``.
        legend_html: Custom legend HTML replacing the default legend.

    Raises:
        InvalidInputError: If the sections cannot be laid out.
        ValueError: If the config is out of range.
    """

    def __init__(
        self,
        sections: Optional[Sequence[Any]] = None,
        total: Optional[float] = None,
        config: Optional[ChartConfig] = None,
        content: Optional[str] = None,
        legend_html: Optional[str] = None,
    ):
        self.config = (config or ChartConfig()).validate()
        self.logger = self.config.get_logger(__name__)
        self.content = content
        self.legend_html = legend_html

        self._sections: List[Any] = list(sections or [])
        self._total = total
        self.arcs: List[Arc] = normalize_sections(self._sections, self._total)

        self.hover = HoverCoordinator()
        self._handlers: Dict[str, List[Callable[[Any], None]]] = {}
        self._measure: Optional[Callable[[], float]] = None
        self._sizer = ResponsiveTextSizer(self._container_width, logger=self.logger)

    # ------------------------------------------------------------------
    # Props
    # ------------------------------------------------------------------
    @property
    def sections(self) -> List[Any]:
        return list(self._sections)

    @property
    def total(self) -> float:
        """Effective total: the explicit one or the sum of section values."""
        if self._total is not None:
            return float(self._total)
        return float(sum(float(section_field(s, "value")) for s in self._sections))

    def set_props(self, **props: Any) -> None:
        """Update props, recomputing only what the changed props feed.

        ``sections`` and ``total`` trigger a new arc layout; ``size`` and
        ``unit`` trigger a font size recalculation. Any other
        :class:`ChartConfig` field is simply replaced.

        Raises:
            TypeError: On an unknown prop name.
            InvalidInputError: If the new sections/total are invalid.
            ValueError: If a config prop is out of range.

        Nothing is applied when any prop is rejected.
        """
        unknown = set(props) - _CONFIG_FIELDS - {"sections", "total", "content", "legend_html"}
        if unknown:
            raise TypeError(f"Unknown prop(s): {', '.join(sorted(unknown))}")

        config_changes = {
            k: v
            for k, v in props.items()
            if k in _CONFIG_FIELDS and getattr(self.config, k) != v
        }
        config = self.config
        if config_changes:
            config = replace(self.config, **config_changes).validate()

        sections = self._sections
        total = self._total
        arcs = self.arcs
        layout_changed = False
        if "sections" in props:
            sections = list(props["sections"] or [])
            layout_changed = True
        if "total" in props and props["total"] != self._total:
            total = props["total"]
            layout_changed = True
        if layout_changed:
            arcs = normalize_sections(sections, total)

        self._sections, self._total, self.arcs = sections, total, arcs
        self.config = config
        if "content" in props:
            self.content = props["content"]
        if "legend_html" in props:
            self.legend_html = props["legend_html"]

        if _FONT_PROPS & set(config_changes):
            self.recalc_font_size()

    # ------------------------------------------------------------------
    # Lifecycle and font sizing
    # ------------------------------------------------------------------
    @property
    def font_size(self) -> float:
        return self._sizer.font_size

    @property
    def is_mounted(self) -> bool:
        return self._sizer.state is not SizerState.UNMOUNTED

    def _container_width(self) -> float:
        if self.config.unit == "px":
            return float(self.config.size)
        if self._measure is None:
            return 0.0
        return self._measure()

    def recalc_font_size(self) -> float:
        return self._sizer.refresh()

    def _on_resize(self) -> None:
        self.recalc_font_size()

    def mount(
        self, channel: ResizeChannel, measure: Optional[Callable[[], float]] = None
    ) -> None:
        """Attach to a host: compute the font size and listen for resizes.

        Args:
            channel: The host's shared resize channel.
            measure: Returns the realized container width in px. Only used
                when ``unit`` is not ``px``.
        """
        self._measure = measure
        self._sizer.mount(channel, on_resize=self._on_resize)

    def unmount(self) -> None:
        """Detach from the host and clear hover state. Never raises."""
        self._sizer.unmount()
        self.hover.reset()

    @contextmanager
    def mounted(
        self, channel: ResizeChannel, measure: Optional[Callable[[], float]] = None
    ) -> Iterator["DonutChart"]:
        self.mount(channel, measure)
        try:
            yield self
        finally:
            self.unmount()

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def set_hover(self, index: int, hovered: bool) -> None:
        self.hover.set_hover(index, hovered)

    def _hover_arc(self, position: int, hovered: bool) -> None:
        # events for arcs dropped by a relayout are ignored
        if 0 <= position < len(self.arcs):
            self.set_hover(self.arcs[position].source_index, hovered)

    def enter_arc(self, position: int) -> None:
        self._hover_arc(position, True)

    def leave_arc(self, position: int) -> None:
        self._hover_arc(position, False)

    def enter_legend(self, index: int) -> None:
        self.set_hover(index, True)

    def leave_legend(self, index: int) -> None:
        self.set_hover(index, False)

    def arc_classes(self, position: int) -> List[str]:
        index = self.arcs[position].source_index
        return ["cdc-section"] + self.hover.classes_for(index, self.config.section_hover_class)

    def legend_classes(self, index: int) -> List[str]:
        return ["cdc-legend-item"] + self.hover.classes_for(
            index, self.config.section_hover_class
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self._handlers.get(event, [])):
            handler(payload)

    def click_arc(self, position: int) -> Any:
        """Activate an arc; emits ``section-click`` with the caller's section."""
        section = self._sections[self.arcs[position].source_index]
        self.emit(SECTION_CLICK, section)
        return section

    def click_legend(self, index: int) -> Any:
        section = self._sections[index]
        self.emit(SECTION_CLICK, section)
        return section

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------
    def placement_styles(self) -> Dict[str, Dict[str, str]]:
        return placement_styles(self.config.legend_placement)

    def donut_style(self) -> str:
        cfg = self.config
        length = css_length(cfg.size, cfg.unit)
        return css_style(
            {"width": length, "padding-bottom": length, "background-color": cfg.foreground}
        )

    def overlay_style(self) -> str:
        cfg = self.config
        inner = f"{fmt_num(100 - cfg.thickness)}%"
        return css_style({"height": inner, "width": inner, "background-color": cfg.background})

    def sections_style(self) -> str:
        return css_style({"transform": css_rotate(self.config.start_angle)})

    def _render_arc(self, position: int, arc: Arc) -> str:
        classes = " ".join(self.arc_classes(position))
        title = f' title="{_html.escape(arc.label)}"' if arc.label else ""
        filler = css_style(
            {"background-color": arc.color, "transform": css_rotate(arc.sweep_deg)}
        )
        return (
            f'<div class="{classes}" data-index="{arc.source_index}" '
            f'style="{css_style({"transform": css_rotate(arc.start_angle_deg)})}">'
            f'<div class="cdc-filler" style="{filler}"{title}></div>'
            f"</div>"
        )

    def _render_overlay_content(self) -> str:
        if self.content is not None:
            return f'<div class="cdc-overlay-content">{self.content}</div>'
        text = _html.escape(self.config.text or "")
        if self.font_size <= 0:
            # nothing measured yet, the stylesheet size applies
            return f'<div class="cdc-text">{text}</div>'
        style = css_style({"font-size": css_length(round(self.font_size, 2))})
        return f'<div class="cdc-text" style="{style}">{text}</div>'

    def _render_legend(self, legend_style: str) -> str:
        if self.legend_html is not None:
            return self.legend_html
        if not self.config.has_legend:
            return ""
        items = []
        for item in legend_items(self._sections):
            classes = " ".join(self.legend_classes(item.index))
            label = _html.escape(item.label)
            items.append(
                f'<span class="{classes}" data-index="{item.index}" title="{label}">'
                f'<span class="cdc-legend-item-color" '
                f'style="{css_style({"background-color": item.color})}"></span>'
                f"<span>{label}</span></span>"
            )
        return f'<div class="cdc-legend" style="{legend_style}">{"".join(items)}</div>'

    def render_html(self, include_css: bool = True) -> str:
        """Render the chart as a self-contained HTML fragment."""
        styles = self.placement_styles()
        arcs = "".join(self._render_arc(pos, arc) for pos, arc in enumerate(self.arcs))
        css = f"<style>{DEFAULT_CSS}</style>" if include_css else ""
        return (
            f"{css}"
            f'<div class="cdc-container" style="{css_style(styles["container"])}">'
            f'<div class="cdc" style="{self.donut_style()}">'
            f'<div class="cdc-sections" style="{self.sections_style()}">{arcs}</div>'
            f'<div class="cdc-overlay" style="{self.overlay_style()}">'
            f"{self._render_overlay_content()}</div>"
            f"</div>"
            f'{self._render_legend(css_style(styles["legend"]))}'
            f"</div>"
        )
