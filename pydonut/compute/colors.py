"""Default color palette for sections without an explicit color."""

from __future__ import annotations

DEFAULT_COLORS: tuple[str, ...] = (
    "#4ea3f1",
    "#8ac926",
    "#ffca3a",
    "#ff595e",
    "#6a4c93",
    "#1982c4",
    "#f15bb5",
    "#00bbf9",
    "#fb8500",
    "#2ec4b6",
    "#e76f51",
    "#9b5de5",
)


def palette_color(index: int, palette: tuple[str, ...] = DEFAULT_COLORS) -> str:
    """Return the palette color for a section position, cycling past the end."""
    return palette[index % len(palette)]
