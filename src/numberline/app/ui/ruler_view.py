from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QAbstractAnimation, QEasingCurve, QPointF, QPropertyAnimation, QRectF, Qt, QTimer, QVariantAnimation, Slot
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen, QPolygonF
from PySide6.QtWidgets import (
    QFrame, QGraphicsDropShadowEffect, QGraphicsItem, QGraphicsPathItem, QGraphicsScene,
    QGraphicsSimpleTextItem, QGraphicsView, QWidget
)

from numberline.config import (
    BASELINE_COLOR, DASH_CYCLE_MS, DEFAULT_RULER, END_COLOR, END_POINT_RADIUS, LABEL_BASELINE,
    RULER_CORNER, RULER_EDGE, RULER_FILL, RULER_HEIGHT, RULER_INSET, RULER_TOP, SCENE_HEIGHT,
    SCROLL_DURATION_MS, START_COLOR, START_POINT_RADIUS, RulerConfig
)
from numberline.model.geometry import tick_layout
from numberline.model.jump import PathOp, PathPlan
from numberline.model.scene import SceneState
from numberline.model.viewport import compute_scroll_target, scroll_offset

logger = logging.getLogger(__name__)

# Qt dash patterns are expressed in multiples of the pen width
PATH_WIDTH = 6.0
PATH_DASH = [10 / PATH_WIDTH, 8 / PATH_WIDTH]
GUIDE_WIDTH = 4.0
GUIDE_DASH = [6 / GUIDE_WIDTH, 4 / GUIDE_WIDTH]

Z_RULER, Z_GUIDES, Z_TICKS, Z_PATH, Z_POINTS = range(5)


def painter_path(plan: PathPlan) -> QPainterPath:
    """Convert the planned commands into a QPainterPath."""
    path = QPainterPath()
    for cmd in plan.commands:
        match cmd.op:
            case PathOp.MOVE:
                path.moveTo(*cmd.end)
            case PathOp.LINE:
                path.lineTo(*cmd.end)
            case PathOp.QUAD:
                (cx, cy), (x, y) = cmd.points
                path.quadTo(cx, cy, x, y)
    return path


class RulerView(QGraphicsView):
    """
    Scrollable number line.

    The ruler body, ticks and labels are drawn once. Guides, the jump path
    and the points form a dynamic layer that is rebuilt for every scene.
    The horizontal scroll bar is the only imperative boundary: it jumps to
    zero on first show and animates toward each new focus afterwards.
    """
    def __init__(self, config: RulerConfig = DEFAULT_RULER, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config

        self.setRenderHints(self.renderHints() | QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing)
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOn)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setFixedHeight(int(SCENE_HEIGHT) + self.horizontalScrollBar().sizeHint().height() + 4)

        self._scene = QGraphicsScene(self)
        self._scene.setSceneRect(QRectF(0.0, 0.0, config.canvas_width, SCENE_HEIGHT))
        self.setScene(self._scene)

        self._dynamic_items: list[QGraphicsItem] = []
        self._path_item: Optional[QGraphicsPathItem] = None
        self._pending_target: float = compute_scroll_target(None, None, config)
        self._mounted = False

        self._scroll_anim = QPropertyAnimation(self.horizontalScrollBar(), b"value", self)
        self._scroll_anim.setDuration(SCROLL_DURATION_MS)
        self._scroll_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        # Marching dashes along the jump path
        self._dash_anim = QVariantAnimation(self)
        self._dash_anim.setStartValue(sum(PATH_DASH))
        self._dash_anim.setEndValue(0.0)
        self._dash_anim.setDuration(DASH_CYCLE_MS)
        self._dash_anim.setLoopCount(-1)
        self._dash_anim.valueChanged.connect(self._on_dash_offset)

        self._build_ruler()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_scene_state(self, state: SceneState) -> None:
        """Replace the dynamic layer with the guides, path and points of `state`."""
        self._clear_dynamic()
        self._pending_target = state.scroll_target
        if not state.is_valid:
            return

        self._add_guide(state.start_x, START_COLOR)
        self._add_guide(state.end_x, END_COLOR)

        if state.path is not None:
            self._add_path(state.path)

        self._add_point(state.start_x, START_POINT_RADIUS, START_COLOR)
        self._add_point(state.end_x, END_POINT_RADIUS, END_COLOR)

    @Slot(float)
    def focus_on(self, target: float) -> None:
        """Animate the viewport toward `target`; before first show, just remember it."""
        self._pending_target = target
        if self._mounted:
            self.center_on(target, animate=True)

    def center_on(self, target: float, animate: bool) -> None:
        bar = self.horizontalScrollBar()
        value = int(round(scroll_offset(target, self.viewport().width())))
        value = max(bar.minimum(), min(bar.maximum(), value))

        # Last write wins
        self._scroll_anim.stop()
        if animate:
            self._scroll_anim.setStartValue(bar.value())
            self._scroll_anim.setEndValue(value)
            self._scroll_anim.start()
        else:
            bar.setValue(value)

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            # Wait for the layout to give the viewport its real width
            QTimer.singleShot(0, lambda: self.center_on(self._pending_target, animate=False))

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _build_ruler(self) -> None:
        width = self.config.canvas_width

        body = QPainterPath()
        body.addRoundedRect(QRectF(RULER_INSET, RULER_TOP, width - 2 * RULER_INSET, RULER_HEIGHT), RULER_CORNER, RULER_CORNER)
        body_item = self._scene.addPath(body, QPen(QColor(RULER_EDGE), 3), QBrush(QColor(RULER_FILL)))
        body_item.setZValue(Z_RULER)
        shadow = QGraphicsDropShadowEffect()
        shadow.setOffset(0, 4)
        shadow.setBlurRadius(8)
        shadow.setColor(QColor(0, 0, 0, 13))
        body_item.setGraphicsEffect(shadow)

        baseline = self._scene.addLine(RULER_INSET, RULER_TOP, width - RULER_INSET, RULER_TOP, QPen(QColor(BASELINE_COLOR), 2))
        baseline.setZValue(Z_RULER)

        ticks = tick_layout(self.config)
        for tick in ticks:
            style = tick.style
            pen = QPen(QColor(style.color), style.stroke_width)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            line = self._scene.addLine(tick.x, RULER_TOP, tick.x, RULER_TOP + style.length, pen)
            line.setZValue(Z_TICKS)

            if style.labelled:
                font = QFont()
                font.setPixelSize(style.font_size)
                font.setWeight(QFont.Weight.Bold if style.font_bold else QFont.Weight.DemiBold)
                self._add_centered_text(str(tick.value), tick.x, LABEL_BASELINE, font, style.label_color, Z_TICKS)

        logger.debug("Ruler built with %d ticks, width %s.", len(ticks), width)

    def _add_centered_text(self, text: str, x: float, baseline: float, font: QFont, color: str, z: int) -> QGraphicsSimpleTextItem:
        item = self._scene.addSimpleText(text, font)
        item.setBrush(QBrush(QColor(color)))
        rect = item.boundingRect()
        # place the text baseline at `baseline`, centered on x
        ascent = rect.height() * 0.8
        item.setPos(x - rect.width() / 2, baseline - ascent)
        item.setZValue(z)
        return item

    def _add_guide(self, x: float, color: str) -> None:
        pen = QPen(QColor(color), GUIDE_WIDTH)
        pen.setDashPattern(GUIDE_DASH)
        line = self._scene.addLine(x, RULER_TOP, x, RULER_TOP + RULER_HEIGHT, pen)
        line.setOpacity(0.4)
        line.setZValue(Z_GUIDES)
        self._dynamic_items.append(line)

    def _add_path(self, plan: PathPlan) -> None:
        logger.debug("Jump path %s", plan.to_svg_path())
        color = QColor(plan.color)

        item = self._scene.addPath(painter_path(plan), self._path_pen(color, 0.0))
        item.setZValue(Z_PATH)
        self._path_item = item
        self._dynamic_items.append(item)

        head = QPolygonF([QPointF(x, y) for x, y in plan.arrowhead])
        arrow = self._scene.addPolygon(head, QPen(Qt.PenStyle.NoPen), QBrush(color))
        arrow.setZValue(Z_PATH)
        self._dynamic_items.append(arrow)

        font = QFont()
        font.setPixelSize(28)
        font.setBold(True)
        label_x, label_y = plan.label_pos
        label = self._add_centered_text(plan.label, label_x, label_y, font, plan.color, Z_PATH)
        self._dynamic_items.append(label)

        if self._dash_anim.state() != QAbstractAnimation.State.Running:
            self._dash_anim.start()

    def _add_point(self, x: float, radius: float, color: str) -> None:
        point = self._scene.addEllipse(
            QRectF(x - radius, RULER_TOP - radius, 2 * radius, 2 * radius),
            QPen(QColor("#ffffff"), 4),
            QBrush(QColor(color)),
        )
        point.setZValue(Z_POINTS)
        self._dynamic_items.append(point)

    @staticmethod
    def _path_pen(color: QColor, offset: float) -> QPen:
        pen = QPen(color, PATH_WIDTH)
        pen.setDashPattern(PATH_DASH)
        pen.setDashOffset(offset)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        return pen

    def _clear_dynamic(self) -> None:
        for item in self._dynamic_items:
            self._scene.removeItem(item)
        self._dynamic_items.clear()
        self._path_item = None
        self._dash_anim.stop()

    @Slot(object)
    def _on_dash_offset(self, value: float) -> None:
        if self._path_item is None:
            return
        self._path_item.setPen(self._path_pen(self._path_item.pen().color(), float(value)))
