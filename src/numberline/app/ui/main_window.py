"""
Main Application Window
=======================
The window that stacks the header, the number line and the input row.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Wiring: It owns the Store and hands it to every panel, so the panels only
   talk to each other through the Store's signals.
"""
from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from numberline.app.application import VISIBLE_APP_NAME
from numberline.app.state import Store
from numberline.app.ui.panels.explanation import ExplanationPanel
from numberline.app.ui.panels.inputs import InputPanel
from numberline.app.ui.panels.ruler import RulerPanel
from numberline.config import DEFAULT_RULER, RulerConfig


class MainWindow(QMainWindow):
    def __init__(self, config: RulerConfig = DEFAULT_RULER) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 860)

        # Global store
        self.store = Store(config, parent=self)

        # --- MAIN CONTAINER ---
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.setCentralWidget(scroll)

        central = QWidget()
        central.setObjectName("central")
        central.setStyleSheet("QWidget#central { background: #f8fafc; }")
        scroll.setWidget(central)

        v = QVBoxLayout(central)
        v.setContentsMargins(24, 24, 24, 24)
        v.setSpacing(18)

        # --- 1. HEADER ---
        v.addWidget(self._build_header())

        # --- 2. NUMBER LINE ---
        self.ruler_panel = RulerPanel(self.store, parent=central)
        v.addWidget(self.ruler_panel)

        # --- 3. INPUTS + RESULT ---
        self.input_panel = InputPanel(self.store, parent=central)
        v.addWidget(self.input_panel)

        # --- 4. EXPLANATION ---
        self.explanation_panel = ExplanationPanel(self.store, parent=central)
        v.addWidget(self.explanation_panel)

        v.addStretch(1)

    def _build_header(self) -> QWidget:
        header = QFrame(self)
        header.setObjectName("header")
        header.setStyleSheet(
            "QFrame#header { background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #6366f1, stop:1 #9333ea);"
            " border-radius: 20px; }"
        )
        layout = QVBoxLayout(header)
        layout.setContentsMargins(24, 18, 24, 18)

        title = QLabel(self.tr(VISIBLE_APP_NAME), header)
        title.setStyleSheet("color: white; font-size: 28px; font-weight: bold;")
        subtitle = QLabel(self.tr("Discover how to add by moving along the number line"), header)
        subtitle.setStyleSheet("color: #e0e7ff; font-size: 15px; font-weight: 500;")

        layout.addWidget(title)
        layout.addWidget(subtitle)
        return header
