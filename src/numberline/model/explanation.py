from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from numberline.model.jump import JumpStyle


class Direction(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def side(self) -> str:
        return "right" if self is Direction.FORWARD else "left"


@dataclass(frozen=True)
class Narrative:
    """The three-step story told next to the ruler: start, move, arrive."""
    start: int
    delta: int
    total: int
    magnitude: int
    direction: Direction
    path_color: str

    @property
    def start_step(self) -> str:
        return f"We start at {self.start}. That is our starting point on the number line."

    @property
    def move_step(self) -> str:
        sign = "not negative" if self.direction is Direction.FORWARD else "negative"
        steps = "step" if self.magnitude == 1 else "steps"
        return (
            f"We add {self.delta}. Since {self.delta} is {sign}, we take "
            f"{self.magnitude} {steps} {self.direction.value}, to the {self.direction.side}. "
            f"(Follow the {self.path_color} line on the number line.)"
        )

    @property
    def arrive_step(self) -> str:
        return f"We land on {self.total}! That is our final result."

    @property
    def steps(self) -> tuple[str, str, str]:
        return self.start_step, self.move_step, self.arrive_step


def explain(start: int, delta: int, total: int) -> Narrative:
    """
    Build the narrative for a complete computation.

    Raises:
        ValueError: If `total` is not `start + delta`.
    """
    if start + delta != total:
        raise ValueError(f"Inconsistent sum: {start} + {delta} != {total}.")
    style = JumpStyle.POSITIVE if delta >= 0 else JumpStyle.NEGATIVE
    return Narrative(
        start=start,
        delta=delta,
        total=total,
        magnitude=abs(delta),
        direction=Direction.FORWARD if delta >= 0 else Direction.BACKWARD,
        path_color=style.color_name,
    )
