"""Tests for the viewport centering policy."""
from numberline.config import RulerConfig
from numberline.model.geometry import to_coordinate
from numberline.model.viewport import compute_scroll_target, scroll_offset


class TestScrollTarget:
    def test_nothing_entered_centers_zero(self):
        assert compute_scroll_target(None, None) == to_coordinate(0)

    def test_start_only_centers_start(self):
        assert compute_scroll_target(5, None) == to_coordinate(5)

    def test_both_center_the_midpoint(self):
        assert compute_scroll_target(5, 3) == (to_coordinate(5) + to_coordinate(8)) / 2

    def test_delta_only_falls_back_to_zero(self):
        assert compute_scroll_target(None, 4) == to_coordinate(0)

    def test_zero_delta_centers_start(self):
        assert compute_scroll_target(-40, 0) == to_coordinate(-40)

    def test_uses_config(self):
        cfg = RulerConfig(margin=0, spacing=1, domain_min=-3, domain_max=3)
        assert compute_scroll_target(None, None, cfg) == 3


class TestScrollOffset:
    def test_target_lands_in_the_middle(self):
        assert scroll_offset(8060, 1000) == 7560

    def test_may_go_negative(self):
        assert scroll_offset(60, 1000) == -440
