"""
Configuration & Constants
=========================
This module serves as the central registry for the ruler geometry and the
visual constants shared by the model and the Qt views.

Why is this file needed?
------------------------
1. Geometry: The ruler's margin, spacing and domain are a named struct
   (RulerConfig), so the pure model can be exercised at small scale.
2. Consistency: Colors and vertical positions are used both by the path
   planner and by the renderer. Keeping them here stops them from drifting.

Exports:
    RulerConfig: Frozen dataclass holding the horizontal geometry.
    DEFAULT_RULER: The [-100, 100] ruler with 60 px margin and 80 px spacing.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RulerConfig:
    """Horizontal geometry of the number line."""
    margin: float = 60.0
    spacing: float = 80.0
    domain_min: int = -100
    domain_max: int = 100

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise ValueError(f"Spacing must be positive, got {self.spacing}.")
        if self.margin < 0:
            raise ValueError(f"Margin must not be negative, got {self.margin}.")
        if self.domain_min >= self.domain_max:
            raise ValueError(
                f"Empty domain: domain_min={self.domain_min} must be below domain_max={self.domain_max}."
            )

    @property
    def tick_count(self) -> int:
        return self.domain_max - self.domain_min + 1

    @property
    def canvas_width(self) -> float:
        """Width that bounds the first and last tick with one margin on each side."""
        return 2 * self.margin + (self.domain_max - self.domain_min) * self.spacing

    def contains(self, value: int) -> bool:
        return self.domain_min <= value <= self.domain_max


DEFAULT_RULER = RulerConfig()

# ---- Vertical layout (scene units, y grows downward) ----
SCENE_HEIGHT: float = 280.0
RULER_INSET: float = 20.0        # horizontal inset of the ruler body
RULER_TOP: float = 180.0         # baseline of the ruler, where ticks start
RULER_HEIGHT: float = 80.0
RULER_CORNER: float = 16.0
LABEL_BASELINE: float = 245.0

PATH_TOP: float = 80.0           # height of the horizontal leg of the jump
PATH_END: float = 155.0          # the jump stops short of the baseline for the arrowhead
PATH_CORNER_RADIUS: float = 20.0
PATH_LABEL_GAP: float = 15.0
ARROW_SIZE: float = 12.0

START_POINT_RADIUS: float = 10.0
END_POINT_RADIUS: float = 12.0

# ---- Palette ----
POSITIVE_COLOR = "#3b82f6"       # blue
NEGATIVE_COLOR = "#ef4444"       # red
START_COLOR = "#3b82f6"
END_COLOR = "#22c55e"
RULER_FILL = "#f8fafc"
RULER_EDGE = "#cbd5e1"
BASELINE_COLOR = "#94a3b8"
WARNING_COLOR = "#d97706"

# ---- Animation timings (ms) ----
SCROLL_DURATION_MS: int = 450
DASH_CYCLE_MS: int = 1000

# Coordinates saturate here; far beyond any scroll range yet exact in a float
COORDINATE_LIMIT: float = 1e15
