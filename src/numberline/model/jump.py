"""
Jump Path Planner
=================
Plans the orthogonal connector drawn from the start value to the end value.

The connector rises from the ruler, turns onto a horizontal leg through a
rounded corner that bends toward the direction of travel, runs above the
ruler and drops into the end point. The corners make left and right jumps
look different even when they are one unit long.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from numberline.config import (
    ARROW_SIZE,
    DEFAULT_RULER,
    NEGATIVE_COLOR,
    PATH_CORNER_RADIUS,
    PATH_END,
    PATH_LABEL_GAP,
    PATH_TOP,
    POSITIVE_COLOR,
    RULER_TOP,
    RulerConfig,
)
from numberline.model.geometry import to_coordinate

Point = tuple[float, float]


class PathOp(StrEnum):
    MOVE = "M"
    LINE = "L"
    QUAD = "Q"


class JumpStyle(StrEnum):
    """Exactly one of these is active whenever a path exists."""
    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def color(self) -> str:
        return POSITIVE_COLOR if self is JumpStyle.POSITIVE else NEGATIVE_COLOR

    @property
    def color_name(self) -> str:
        return "blue" if self is JumpStyle.POSITIVE else "red"


@dataclass(frozen=True)
class PathCommand:
    """One drawing command; QUAD carries (control, end), the others a single point."""
    op: PathOp
    points: tuple[Point, ...]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass(frozen=True)
class PathPlan:
    start_x: float
    end_x: float
    direction: int
    positive: bool
    delta: int
    corner_radius: float
    commands: tuple[PathCommand, ...]
    arrowhead: tuple[Point, Point, Point]
    label: str
    label_pos: Point

    @property
    def style(self) -> JumpStyle:
        return JumpStyle.POSITIVE if self.positive else JumpStyle.NEGATIVE

    @property
    def color(self) -> str:
        return self.style.color

    def to_svg_path(self) -> str:
        """Serialize the commands as SVG path data, handy for debugging."""
        parts = []
        for cmd in self.commands:
            coords = " ".join(f"{x:g} {y:g}" for x, y in cmd.points)
            parts.append(f"{cmd.op.value} {coords}")
        return " ".join(parts)


def format_delta(delta: int) -> str:
    """Signed label for the jump: explicit '+' for non-negative values."""
    return f"+{delta}" if delta >= 0 else str(delta)


def _connector(start_x: float, end_x: float, direction: int, radius: float) -> tuple[PathCommand, ...]:
    top = PATH_TOP
    return (
        PathCommand(PathOp.MOVE, ((start_x, RULER_TOP),)),
        PathCommand(PathOp.LINE, ((start_x, top + radius),)),
        PathCommand(PathOp.QUAD, ((start_x, top), (start_x + radius * direction, top))),
        PathCommand(PathOp.LINE, ((end_x - radius * direction, top),)),
        PathCommand(PathOp.QUAD, ((end_x, top), (end_x, top + radius))),
        PathCommand(PathOp.LINE, ((end_x, PATH_END),)),
    )


def _arrowhead(tail: Point, tip_anchor: Point, size: float = ARROW_SIZE) -> tuple[Point, Point, Point]:
    """
    Triangle pointing along the segment tail -> tip_anchor, centered on tip_anchor.

    Returns:
        (tip, left corner, right corner)
    """
    dx, dy = tip_anchor[0] - tail[0], tip_anchor[1] - tail[1]
    length = math.hypot(dx, dy) or 1.0
    ux, uy = dx / length, dy / length
    half = size / 2
    tip = (tip_anchor[0] + ux * half, tip_anchor[1] + uy * half)
    base_x, base_y = tip_anchor[0] - ux * half, tip_anchor[1] - uy * half
    # perpendicular (-uy, ux)
    left = (base_x - uy * half, base_y + ux * half)
    right = (base_x + uy * half, base_y - ux * half)
    return tip, left, right


def plan_path(
    start: Optional[int],
    delta: Optional[int],
    config: RulerConfig = DEFAULT_RULER,
) -> Optional[PathPlan]:
    """
    Plan the jump from `start` to `start + delta`.

    Args:
        start: Parsed start value, or None.
        delta: Parsed movement, or None.
        config: Ruler geometry.

    Returns:
        None when an input is missing or there is no movement, otherwise the
        full geometric description of the connector.
    """
    if start is None or delta is None or delta == 0:
        return None

    start_x = to_coordinate(start, config)
    end_x = to_coordinate(start + delta, config)
    # Same as comparing end_x with start_x, but survives saturated coordinates
    direction = 1 if delta > 0 else -1

    # Both corners have to fit on the horizontal leg
    radius = min(PATH_CORNER_RADIUS, abs(end_x - start_x) / 2)
    commands = _connector(start_x, end_x, direction, radius)
    arrowhead = _arrowhead(commands[-2].end, commands[-1].end)

    return PathPlan(
        start_x=start_x,
        end_x=end_x,
        direction=direction,
        positive=delta >= 0,
        delta=delta,
        corner_radius=radius,
        commands=commands,
        arrowhead=arrowhead,
        label=format_delta(delta),
        label_pos=((start_x + end_x) / 2, PATH_TOP - PATH_LABEL_GAP),
    )
