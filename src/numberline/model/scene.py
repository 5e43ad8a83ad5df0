"""
Scene Derivation
================
Turns the two raw input strings into everything the window has to show.

Why is this file needed?
------------------------
1. Purity: Validation, geometry, path planning, centering and the narrative
   are combined here without touching Qt, so the whole visual transcript can
   be checked in plain unit tests.
2. Single source: The Store, the ruler view, the result box and the
   explanation panel all read the same SceneState instead of re-deriving
   pieces of it.

Classes:
    SceneState: Immutable result of one derivation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from numberline.config import DEFAULT_RULER, RulerConfig
from numberline.model.explanation import Narrative, explain
from numberline.model.geometry import to_coordinate
from numberline.model.jump import PathPlan, plan_path
from numberline.model.validation import parse_value
from numberline.model.viewport import compute_scroll_target

RESULT_PLACEHOLDER = "?"


@dataclass(frozen=True)
class SceneState:
    start_text: str
    delta_text: str
    start: Optional[int]
    delta: Optional[int]
    total: Optional[int]
    start_x: Optional[float]
    end_x: Optional[float]
    path: Optional[PathPlan]
    out_of_range: bool
    warning: Optional[str]
    narrative: Optional[Narrative]
    scroll_target: float

    @property
    def is_valid(self) -> bool:
        return self.start is not None and self.delta is not None

    @property
    def result_text(self) -> str:
        return RESULT_PLACEHOLDER if self.total is None else str(self.total)

    @property
    def focus_key(self) -> tuple[Optional[int], Optional[int], bool]:
        """Changes of this key, and only those, move the viewport."""
        return self.start, self.delta, self.is_valid


def out_of_range(start: Optional[int], total: Optional[int], config: RulerConfig = DEFAULT_RULER) -> bool:
    """True when a complete computation has its start or its sum off the ruler."""
    if start is None or total is None:
        return False
    return (
        start < config.domain_min
        or start > config.domain_max
        or total < config.domain_min
        or total > config.domain_max
    )


def warning_message(config: RulerConfig = DEFAULT_RULER) -> str:
    return (
        f"Some numbers are outside the visible line ({config.domain_min} to {config.domain_max}), "
        f"but the calculation is still correct."
    )


def derive_scene(start_text: str, delta_text: str, config: RulerConfig = DEFAULT_RULER) -> SceneState:
    """
    Derive the complete scene for a pair of raw inputs.

    Args:
        start_text: Content of the start field.
        delta_text: Content of the movement field.
        config: Ruler geometry.

    Returns:
        SceneState with every derived entity. Incomplete input is a defined
        state: no total, no guides, no path, no narrative.
    """
    start = parse_value(start_text)
    delta = parse_value(delta_text)
    valid = start is not None and delta is not None

    total = start + delta if valid else None
    flagged = out_of_range(start, total, config)

    return SceneState(
        start_text=start_text,
        delta_text=delta_text,
        start=start,
        delta=delta,
        total=total,
        start_x=to_coordinate(start, config) if valid else None,
        end_x=to_coordinate(total, config) if valid else None,
        path=plan_path(start, delta, config),
        out_of_range=flagged,
        warning=warning_message(config) if flagged else None,
        narrative=explain(start, delta, total) if valid else None,
        scroll_target=compute_scroll_target(start, delta, config),
    )
