"""Tests for the RulerView scroll boundary: pending focus, first-show jump, animated refocus."""
import logging

import pytest
from PySide6.QtCore import QAbstractAnimation
from PySide6.QtTest import QTest

from numberline.app.ui.ruler_view import RulerView
from numberline.model.geometry import to_coordinate
from numberline.model.scene import derive_scene
from numberline.model.viewport import scroll_offset


def expected_scroll(view, target):
    bar = view.horizontalScrollBar()
    value = int(round(scroll_offset(target, view.viewport().width())))
    return max(bar.minimum(), min(bar.maximum(), value))


@pytest.fixture
def view(qapp):
    ruler = RulerView()
    ruler.resize(800, ruler.height())
    yield ruler
    ruler._scroll_anim.stop()
    ruler._dash_anim.stop()
    ruler.close()
    ruler.deleteLater()


def mount(view):
    view.show()
    # Lets the deferred first-show centering run
    QTest.qWait(50)


# ── before first show ─────────────────────────────────────────────────────────

class TestBeforeMount:
    def test_starts_on_zero(self, view):
        assert view._pending_target == to_coordinate(0)

    def test_focus_is_only_recorded(self, view):
        bar = view.horizontalScrollBar()
        before = bar.value()
        view.focus_on(to_coordinate(40))
        assert view._pending_target == to_coordinate(40)
        assert bar.value() == before
        assert view._scroll_anim.state() != QAbstractAnimation.State.Running


# ── first show ────────────────────────────────────────────────────────────────

class TestFirstShow:
    def test_jumps_to_zero_without_animation(self, view):
        mount(view)
        assert view.horizontalScrollBar().value() == expected_scroll(view, to_coordinate(0))
        assert view._scroll_anim.state() != QAbstractAnimation.State.Running

    def test_jumps_to_focus_requested_before_show(self, view):
        view.focus_on(to_coordinate(-30))
        mount(view)
        assert view.horizontalScrollBar().value() == expected_scroll(view, to_coordinate(-30))
        assert view._scroll_anim.state() != QAbstractAnimation.State.Running


# ── refocus ───────────────────────────────────────────────────────────────────

class TestRefocus:
    def test_later_focus_animates(self, view):
        mount(view)
        view.focus_on(to_coordinate(50))
        assert view._scroll_anim.state() == QAbstractAnimation.State.Running
        assert view._scroll_anim.endValue() == expected_scroll(view, to_coordinate(50))

    def test_last_focus_wins(self, view):
        mount(view)
        view.focus_on(to_coordinate(50))
        view.focus_on(to_coordinate(-50))
        assert view._scroll_anim.state() == QAbstractAnimation.State.Running
        assert view._scroll_anim.endValue() == expected_scroll(view, to_coordinate(-50))


# ── dynamic layer ─────────────────────────────────────────────────────────────

class TestSceneState:
    def test_path_is_drawn_and_logged(self, view, caplog):
        caplog.set_level(logging.DEBUG, logger="numberline.app.ui.ruler_view")
        scene = derive_scene("3", "-5")
        view.set_scene_state(scene)
        assert view._path_item is not None
        assert view._dash_anim.state() == QAbstractAnimation.State.Running
        assert scene.path.to_svg_path() in caplog.text

    def test_incomplete_scene_clears_the_layer(self, view):
        view.set_scene_state(derive_scene("3", "-5"))
        view.set_scene_state(derive_scene("3", ""))
        assert view._path_item is None
        assert view._dynamic_items == []
        assert view._pending_target == to_coordinate(3)
