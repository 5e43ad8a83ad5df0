"""Tests for derive_scene() — the full visual transcript of one input pair."""
import pytest
from numberline.config import RulerConfig
from numberline.model.explanation import Direction
from numberline.model.geometry import to_coordinate
from numberline.model.jump import JumpStyle
from numberline.model.scene import RESULT_PLACEHOLDER, derive_scene, out_of_range


# ── end-to-end scenarios ──────────────────────────────────────────────────────

class TestScenarios:
    def test_three_minus_five(self):
        scene = derive_scene("3", "-5")
        assert scene.is_valid
        assert scene.total == -2
        assert scene.result_text == "-2"
        assert scene.path.direction == -1
        assert scene.path.style is JumpStyle.NEGATIVE
        assert scene.narrative.magnitude == 5
        assert scene.narrative.direction is Direction.BACKWARD
        assert "-2" in scene.narrative.arrive_step

    def test_missing_start(self):
        scene = derive_scene("", "4")
        assert not scene.is_valid
        assert scene.total is None
        assert scene.result_text == RESULT_PLACEHOLDER
        assert scene.narrative is None
        assert scene.path is None
        assert scene.start_x is None and scene.end_x is None

    def test_lone_minus_counts_as_missing(self):
        scene = derive_scene("-", "4")
        assert not scene.is_valid
        assert scene.scroll_target == to_coordinate(0)

    def test_nothing_entered(self):
        scene = derive_scene("", "")
        assert scene.result_text == "?"
        assert scene.scroll_target == to_coordinate(0)
        assert scene.warning is None

    def test_zero_delta_keeps_guides_but_no_path(self):
        scene = derive_scene("7", "0")
        assert scene.is_valid
        assert scene.path is None
        assert scene.start_x == scene.end_x == to_coordinate(7)
        assert scene.narrative is not None

    def test_scroll_target_for_complete_input(self):
        scene = derive_scene("5", "3")
        assert scene.scroll_target == (to_coordinate(5) + to_coordinate(8)) / 2

    def test_idempotent(self):
        assert derive_scene("12", "-30") == derive_scene("12", "-30")
        assert derive_scene("", "9") == derive_scene("", "9")


# ── out-of-range warning ──────────────────────────────────────────────────────

class TestOutOfRange:
    def test_both_ends_off_ruler(self):
        scene = derive_scene("150", "-10")
        assert scene.total == 140
        assert scene.out_of_range
        assert "still correct" in scene.warning

    def test_inside_ruler(self):
        scene = derive_scene("50", "10")
        assert not scene.out_of_range
        assert scene.warning is None

    def test_sum_off_ruler_only(self):
        assert derive_scene("95", "10").out_of_range

    def test_start_off_ruler_only(self):
        assert derive_scene("-120", "30").out_of_range

    def test_edges_are_inside(self):
        assert not derive_scene("-100", "200").out_of_range

    def test_incomplete_input_never_warns(self):
        assert not derive_scene("500", "").out_of_range
        assert out_of_range(500, None) is False

    def test_message_names_configured_domain(self):
        cfg = RulerConfig(domain_min=-3, domain_max=3)
        scene = derive_scene("2", "2", cfg)
        assert scene.out_of_range
        assert "(-3 to 3)" in scene.warning


    def test_huge_start_is_derived_not_raised(self):
        scene = derive_scene("1" * 400, "1")
        assert scene.is_valid
        assert scene.total == int("1" * 399 + "2")
        assert scene.out_of_range
        assert scene.path.direction == 1
        assert scene.path.style is JumpStyle.POSITIVE

    def test_huge_backward_jump_keeps_its_direction(self):
        scene = derive_scene("5", "-" + "9" * 400)
        assert scene.path.direction == -1
        assert scene.path.style is JumpStyle.NEGATIVE

    def test_overlong_input_is_incomplete(self):
        scene = derive_scene("1" * 5000, "1")
        assert not scene.is_valid
        assert scene.result_text == RESULT_PLACEHOLDER

# ── focus key ─────────────────────────────────────────────────────────────────

class TestFocusKey:
    def test_equivalent_texts_share_a_key(self):
        assert derive_scene("05", "1").focus_key == derive_scene("5", "1").focus_key

    @pytest.mark.parametrize("a,b", [(("5", ""), ("5", "1")), (("5", "1"), ("6", "1")), (("", ""), ("0", ""))])
    def test_value_changes_change_the_key(self, a, b):
        assert derive_scene(*a).focus_key != derive_scene(*b).focus_key
