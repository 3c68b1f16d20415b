import argparse

import numpy as np
import pandas as pd
import pytest

from pydonut.api import Chart, layout, render, sections_from_frame
from pydonut.compute import InvalidInputError
from pydonut.config import ChartConfig


def test_chart_save_and_repr(tmp_path):
    chart = render([{"value": 1}, {"value": 3}])

    html_path = tmp_path / "chart.html"
    chart.save_html(str(html_path))
    assert html_path.exists()
    assert 'class="cdc-container"' in html_path.read_text(encoding="utf-8")

    assert chart._repr_html_() == chart.html


def test_render_returns_arcs():
    chart = render([{"value": 60}, {"value": 20}], config=ChartConfig(text="80"))
    assert isinstance(chart, Chart)
    assert len(chart.arcs) == 3
    assert "80" in chart.html


def test_render_respects_total():
    chart = render([{"value": 90}], total=200)
    assert len(chart.arcs) == 1


def test_render_sets_font_size():
    chart = render([{"value": 1}], config=ChartConfig(size=100, text="x"))
    assert "font-size: 8px" in chart.html


def test_layout_raises_when_total_exceeded():
    with pytest.raises(InvalidInputError, match="should not exceed"):
        layout([{"value": 25}, {"value": 26}], total=50)


def test_chart_to_frame():
    chart = render([{"value": 60, "label": "big"}, {"value": 20}])
    df = chart.to_frame()

    assert list(df.columns) == ["source_index", "start_angle_deg", "sweep_deg", "color", "label"]
    assert len(df) == 3
    assert df["source_index"].tolist() == [0, 0, 1]
    assert np.isclose(df["sweep_deg"].sum(), 360.0)


def test_sections_from_frame():
    df = pd.DataFrame(
        {
            "amount": [10, 20, 30],
            "name": ["a", None, "c"],
            "hue": ["#111111", "#222222", np.nan],
        }
    )
    sections = sections_from_frame(df, value="amount", label="name", color="hue")

    assert sections == [
        {"value": 10.0, "label": "a", "color": "#111111"},
        {"value": 20.0, "color": "#222222"},
        {"value": 30.0, "label": "c"},
    ]


def test_sections_from_frame_missing_column():
    df = pd.DataFrame({"value": [1, 2]})
    with pytest.raises(KeyError):
        sections_from_frame(df, label="nope")


def test_config_from_options():
    ns = argparse.Namespace(size=120.0, unit=None, has_legend=True, file="ignored.csv")
    cfg = ChartConfig.from_options(ns)

    assert cfg.size == 120.0
    assert cfg.unit == "px"
    assert cfg.has_legend is True


def test_render_with_relative_unit_leaves_font_size_to_css():
    chart = render([{"value": 1}], config=ChartConfig(size=50, unit="%", text="x"))
    assert "font-size: 0px" not in chart.html
    assert '<div class="cdc-text">x</div>' in chart.html
