"""Interactive state shared across chart views."""

from .hover import HoverCoordinator
from .resize import ResizeChannel, ResizeSubscription, ResponsiveTextSizer, SizerState

__all__ = [
    "HoverCoordinator",
    "ResizeChannel",
    "ResizeSubscription",
    "ResponsiveTextSizer",
    "SizerState",
]
