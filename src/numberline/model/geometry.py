"""
Ruler Geometry
==============
Maps integer values onto the horizontal axis of the ruler and lays out its
ticks.

The mapping is strictly linear and does not clamp to the domain: values
outside it land outside the visible ruler but stay geometrically consistent,
so a jump that leaves the ruler is still drawn in the right direction. Only
integers too large to represent as a float coordinate saturate.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from numberline.config import COORDINATE_LIMIT, DEFAULT_RULER, RulerConfig


class TickTier(IntEnum):
    """Visual prominence of a tick. Higher value = more prominent."""
    MINOR = 0
    MEDIUM = 1
    MAJOR = 2
    ZERO = 3


@dataclass(frozen=True)
class TickStyle:
    stroke_width: float
    length: float
    color: str
    labelled: bool
    font_size: int
    font_bold: bool
    label_color: str


TICK_STYLES: dict[TickTier, TickStyle] = {
    TickTier.ZERO: TickStyle(
        stroke_width=4.0, length=35.0, color="#0f172a",
        labelled=True, font_size=26, font_bold=True, label_color="#0f172a",
    ),
    TickTier.MAJOR: TickStyle(
        stroke_width=3.0, length=25.0, color="#64748b",
        labelled=True, font_size=26, font_bold=True, label_color="#334155",
    ),
    TickTier.MEDIUM: TickStyle(
        stroke_width=2.5, length=15.0, color="#64748b",
        labelled=False, font_size=20, font_bold=False, label_color="#64748b",
    ),
    TickTier.MINOR: TickStyle(
        stroke_width=2.0, length=10.0, color="#94a3b8",
        labelled=False, font_size=20, font_bold=False, label_color="#64748b",
    ),
}


@dataclass(frozen=True)
class Tick:
    value: int
    x: float
    tier: TickTier

    @property
    def style(self) -> TickStyle:
        return TICK_STYLES[self.tier]


def to_coordinate(value: int, config: RulerConfig = DEFAULT_RULER) -> float:
    """
    Convert an integer value to an x coordinate on the ruler.

    Args:
        value: Any integer, inside the domain or not.
        config: Ruler geometry.

    Returns:
        margin + (value - domain_min) * spacing, saturated at
        +/-COORDINATE_LIMIT so that integers too large for a float still map.
    """
    offset = value - config.domain_min
    # int vs float comparison is exact and cannot overflow
    if abs(offset) > COORDINATE_LIMIT / config.spacing:
        return COORDINATE_LIMIT if offset > 0 else -COORDINATE_LIMIT
    return config.margin + offset * config.spacing


def classify(value: int) -> TickTier:
    """Classify a tick: zero, multiple of 10, multiple of 5, anything else."""
    if value == 0:
        return TickTier.ZERO
    if value % 10 == 0:
        return TickTier.MAJOR
    if value % 5 == 0:
        return TickTier.MEDIUM
    return TickTier.MINOR


def tick_style(tier: TickTier) -> TickStyle:
    return TICK_STYLES[tier]


def tick_layout(config: RulerConfig = DEFAULT_RULER) -> list[Tick]:
    """One tick per integer of the domain, left to right."""
    values = np.arange(config.domain_min, config.domain_max + 1, dtype=np.int64)
    xs = config.margin + (values - config.domain_min) * config.spacing
    return [Tick(value=int(v), x=float(x), tier=classify(int(v))) for v, x in zip(values, xs)]
