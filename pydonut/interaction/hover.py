"""Shared hover state for the arc and legend views of a chart."""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional


class HoverCoordinator:
    """Indexed hover flags shared by every view of the same chart instance.

    The flag is keyed by the logical section index, not by arc position, so
    both halves of a split section and its legend entry always agree.
    """

    def __init__(self) -> None:
        self._hovered: Dict[int, bool] = {}

    def set_hover(self, index: int, hovered: bool) -> None:
        """Set the hover flag of one section index.

        Repeated enters and leaves of an index that was never entered are
        no-ops for every other index.
        """
        if hovered:
            self._hovered[index] = True
        else:
            self._hovered.pop(index, None)

    def is_hovered(self, index: int) -> bool:
        return self._hovered.get(index, False)

    @property
    def hovered(self) -> FrozenSet[int]:
        """Indices currently hovered."""
        return frozenset(self._hovered)

    def reset(self) -> None:
        self._hovered.clear()

    def classes_for(self, index: int, hover_class: Optional[str]) -> List[str]:
        """Extra CSS classes a view of ``index`` should carry."""
        if hover_class and self.is_hovered(index):
            return [hover_class]
        return []
