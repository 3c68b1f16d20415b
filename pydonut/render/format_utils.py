from __future__ import annotations

import math
from typing import Mapping, Optional


def fmt_num(x: float) -> str:
    """Format a number for CSS: integers without decimals, others trimmed."""
    try:
        if isinstance(x, float) and (math.isnan(x) or math.isinf(x)):
            return "0"
        if float(x).is_integer():
            return str(int(x))
        return f"{float(x):.4f}".rstrip("0").rstrip(".")
    except (TypeError, ValueError):
        return str(x)


def css_length(value: float, unit: str = "px") -> str:
    return f"{fmt_num(value)}{unit}"


def css_rotate(deg: float) -> str:
    return f"rotate({fmt_num(deg)}deg)"


def css_style(props: Mapping[str, Optional[str]]) -> str:
    """Serialize a property mapping to an inline ``style`` value, skipping ``None``."""
    return "; ".join(f"{k}: {v}" for k, v in props.items() if v is not None)
