from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from numberline.app.state import Store
from numberline.app.ui.panels.base import BasePanel
from numberline.model.scene import SceneState

STEP_COLORS = ("#3b82f6", "#f97316", "#22c55e")


class ExplanationPanel(BasePanel):
    """
    "What is happening?" box with the three numbered steps.

    Hidden entirely while the computation is incomplete.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        frame = QFrame(self)
        frame.setObjectName("explanation")
        frame.setStyleSheet(
            "QFrame#explanation { background: #eef2ff; border: 1px solid #e0e7ff; border-radius: 16px; }"
        )
        root.addWidget(frame)

        grid = QGridLayout(frame)
        grid.setVerticalSpacing(14)
        title = QLabel(self.tr("What is happening?"), frame)
        title.setStyleSheet("color: #312e81; font-size: 20px; font-weight: bold;")
        grid.addWidget(title, 0, 0, 1, 2)

        self.step_labels: list[QLabel] = []
        for i, color in enumerate(STEP_COLORS, start=1):
            bullet = QLabel(str(i), frame)
            bullet.setFixedSize(32, 32)
            bullet.setAlignment(Qt.AlignmentFlag.AlignCenter)
            bullet.setStyleSheet(f"background: {color}; color: white; border-radius: 16px; font-weight: bold;")
            text = QLabel("", frame)
            text.setWordWrap(True)
            text.setStyleSheet("color: #3730a3; font-size: 16px;")
            grid.addWidget(bullet, i, 0, Qt.AlignmentFlag.AlignTop)
            grid.addWidget(text, i, 1)
            self.step_labels.append(text)
        grid.setColumnStretch(1, 1)

        self.on_scene_changed(store.scene)

    def on_scene_changed(self, scene: SceneState) -> None:
        narrative = scene.narrative
        if narrative is None:
            self.setVisible(False)
            return
        for label, step in zip(self.step_labels, narrative.steps):
            label.setText(step)
        self.setVisible(True)
