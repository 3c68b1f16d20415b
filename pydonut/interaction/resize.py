"""Resize notifications and responsive center-text sizing.

The host environment (a browser window, a notebook output area, a test)
owns a single :class:`ResizeChannel`. Each chart instance registers its own
handler on it when mounted and removes exactly that handler when unmounted.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, List, Optional

RESIZE_EVENT = "resize"

# Font size in px per px of container width.
FONT_SIZE_RATIO = 0.08

Handler = Callable[[], None]


class ResizeChannel:
    """Event channel shared by every chart hosted in the same viewport."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Handler]] = {}

    def add_listener(self, event: str, handler: Handler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Handler) -> None:
        """Remove one registration of ``handler``; unknown handlers are ignored."""
        handlers = self._listeners.get(event, [])
        for i, registered in enumerate(handlers):
            if registered is handler:
                del handlers[i]
                break

    def listener_count(self, event: str = RESIZE_EVENT) -> int:
        return len(self._listeners.get(event, []))

    def dispatch(self, event: str = RESIZE_EVENT) -> None:
        """Deliver ``event`` synchronously to the handlers registered right now."""
        for handler in list(self._listeners.get(event, [])):
            handler()


class ResizeSubscription:
    """Handle for one registered handler; closing it deregisters exactly once."""

    def __init__(self, channel: ResizeChannel, handler: Handler, event: str = RESIZE_EVENT):
        self.channel = channel
        self.handler = handler
        self.event = event
        channel.add_listener(event, handler)
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        if not self._active:
            return
        self._active = False
        self.channel.remove_listener(self.event, self.handler)

    def __enter__(self) -> "ResizeSubscription":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class SizerState(Enum):
    UNMOUNTED = "unmounted"
    MOUNTED = "mounted"
    LISTENING = "listening"


class ResponsiveTextSizer:
    """Keeps the center font size proportional to the measured container width.

    Args:
        measure: Callable returning the realized container width in px. It is
            called on every recalculation; failures count as a zero width.
        ratio: Font size per px of width.
        logger: Optional logger; defaults to the module logger.
    """

    def __init__(
        self,
        measure: Callable[[], float],
        ratio: float = FONT_SIZE_RATIO,
        logger: Optional[logging.Logger] = None,
    ):
        self.measure = measure
        self.ratio = ratio
        self.logger = logger or logging.getLogger(__name__)
        self.font_size: float = 0.0
        self.state = SizerState.UNMOUNTED
        self._subscription: Optional[ResizeSubscription] = None

    def recalc(self, container_width_px: float) -> float:
        """Compute and store the font size for a container width."""
        width = float(container_width_px)
        if not math.isfinite(width) or width < 0:
            width = 0.0
        self.font_size = width * self.ratio
        return self.font_size

    def measure_width(self) -> float:
        try:
            width = float(self.measure())
        except Exception as e:
            self.logger.debug("container measurement failed, using 0: %s", e)
            return 0.0
        if not math.isfinite(width):
            return 0.0
        return width

    def refresh(self) -> float:
        """Measure the container and recalculate."""
        font_size = self.recalc(self.measure_width())
        self.logger.debug("font size recalculated: %.2fpx", font_size)
        return font_size

    def mount(self, channel: ResizeChannel, on_resize: Optional[Handler] = None) -> None:
        """Recalculate once and start listening to ``channel``.

        ``on_resize`` replaces the default handler (``refresh``) so an owner
        can route notifications through its own recalculation method.
        """
        if self.state is not SizerState.UNMOUNTED:
            return
        handler = on_resize or self.refresh
        self.state = SizerState.MOUNTED
        handler()
        self._subscription = ResizeSubscription(channel, handler)
        self.state = SizerState.LISTENING
        self.logger.debug("resize listener registered")

    def unmount(self) -> None:
        """Stop listening. Safe to call at any point and more than once."""
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None
            self.logger.debug("resize listener removed")
        self.state = SizerState.UNMOUNTED
