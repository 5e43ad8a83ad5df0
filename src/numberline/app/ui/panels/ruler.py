from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from numberline.app.state import Store
from numberline.app.ui.panels.base import BasePanel
from numberline.app.ui.ruler_view import RulerView
from numberline.config import WARNING_COLOR
from numberline.model.scene import SceneState


class RulerPanel(BasePanel):
    """Heading, the scrollable ruler and the out-of-range banner."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        config = store.config

        root = QVBoxLayout(self)
        title = QLabel(
            self.tr("Number Line ({lo} to {hi})").format(lo=config.domain_min, hi=config.domain_max), self
        )
        title.setStyleSheet("color: #334155; font-size: 17px; font-weight: bold;")
        root.addWidget(title)

        self.view = RulerView(config, self)
        root.addWidget(self.view)

        self.warning = QLabel("", self)
        self.warning.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.warning.setWordWrap(True)
        self.warning.setStyleSheet(
            f"color: {WARNING_COLOR}; background: #fffbeb; border: 1px solid #fde68a; "
            f"border-radius: 8px; padding: 6px; font-weight: 500;"
        )
        self.warning.setVisible(False)
        root.addWidget(self.warning)

        store.focus_changed.connect(self.view.focus_on)
        self.on_scene_changed(store.scene)

    def on_scene_changed(self, scene: SceneState) -> None:
        self.view.set_scene_state(scene)
        if scene.warning:
            self.warning.setText("⚠ " + scene.warning)
        self.warning.setVisible(scene.out_of_range)
