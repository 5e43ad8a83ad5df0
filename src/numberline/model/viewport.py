from __future__ import annotations

from typing import Optional

from numberline.config import DEFAULT_RULER, RulerConfig
from numberline.model.geometry import to_coordinate


def compute_scroll_target(
    start: Optional[int],
    delta: Optional[int],
    config: RulerConfig = DEFAULT_RULER,
) -> float:
    """
    Coordinate that should sit in the middle of the viewport.

    Rules, in priority order:
        1. both values known -> midpoint between start and end,
        2. only the start is known -> the start,
        3. otherwise -> zero.
    """
    if start is not None and delta is not None:
        return (to_coordinate(start, config) + to_coordinate(start + delta, config)) / 2
    if start is not None:
        return to_coordinate(start, config)
    return to_coordinate(0, config)


def scroll_offset(target: float, visible_width: float) -> float:
    """Left edge of the viewport that centers `target`."""
    return target - visible_width / 2
