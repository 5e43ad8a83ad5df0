from __future__ import annotations

from PySide6.QtCore import Qt, Slot, QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from numberline.app.state import Store
from numberline.app.ui.panels.base import BasePanel
from numberline.model.scene import RESULT_PLACEHOLDER, SceneState
from numberline.model.validation import INPUT_PATTERN

# (badge, question, accent, light background)
CARDS = {
    "start": ("START", "Where are you?", "#3b82f6", "#eff6ff"),
    "delta": ("MOVE", "How far do you move?", "#f97316", "#fff7ed"),
    "result": ("ARRIVAL", "Result", "#22c55e", "#f0fdf4"),
}

VALUE_STYLE = """
    font-size: 32px; font-weight: bold; font-family: monospace;
    background: white; border: 2px solid {accent}; border-radius: 14px;
    padding: 8px; color: {accent};
"""


class InputPanel(BasePanel):
    """
    Start + Movement = Result row.

    Both line edits only accept text matching INPUT_PATTERN; any other
    keystroke or paste is refused by the validator and the field keeps its
    previous content.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        row = QHBoxLayout(self)
        row.setSpacing(24)
        row.addStretch(1)

        self.start_edit = self._make_edit("start")
        self.delta_edit = self._make_edit("delta")
        self.result_label = QLabel(RESULT_PLACEHOLDER)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.result_label.setStyleSheet(VALUE_STYLE.format(accent=CARDS["result"][2]))
        self.result_label.setMinimumHeight(64)

        row.addWidget(self._make_card("start", self.start_edit))
        row.addWidget(self._make_operator("+"))
        row.addWidget(self._make_card("delta", self.delta_edit))
        row.addWidget(self._make_operator("="))
        row.addWidget(self._make_card("result", self.result_label))
        row.addStretch(1)

        self.start_edit.textEdited.connect(self._on_start_edited)
        self.delta_edit.textEdited.connect(self._on_delta_edited)

    def on_scene_changed(self, scene: SceneState) -> None:
        self.result_label.setText(scene.result_text)
        placeholder = scene.total is None
        accent = "#bbf7d0" if placeholder else CARDS["result"][2]
        self.result_label.setStyleSheet(VALUE_STYLE.format(accent=accent))

    @Slot(str)
    def _on_start_edited(self, text: str) -> None:
        if not self.store.set_start_text(text):
            self.start_edit.setText(self.store.start_text)

    @Slot(str)
    def _on_delta_edited(self, text: str) -> None:
        if not self.store.set_delta_text(text):
            self.delta_edit.setText(self.store.delta_text)

    def _make_edit(self, key: str) -> QLineEdit:
        edit = QLineEdit(self)
        edit.setValidator(QRegularExpressionValidator(QRegularExpression(INPUT_PATTERN), edit))
        edit.setPlaceholderText("0")
        edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        edit.setStyleSheet(VALUE_STYLE.format(accent=CARDS[key][2]))
        edit.setObjectName(f"{key}_edit")
        return edit

    def _make_card(self, key: str, value_widget: QWidget) -> QFrame:
        badge_text, question, accent, background = CARDS[key]
        card = QFrame(self)
        card.setObjectName(f"{key}_card")
        card.setStyleSheet(
            f"QFrame#{key}_card {{ background: {background}; border: 2px solid {accent}; border-radius: 22px; }}"
        )
        card.setFixedWidth(220)

        col = QVBoxLayout(card)
        badge = QLabel(badge_text, card)
        badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        badge.setStyleSheet(
            f"background: {accent}; color: white; font-size: 11px; font-weight: bold; "
            f"border-radius: 9px; padding: 3px 10px;"
        )
        label = QLabel(question.upper(), card)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(f"color: {accent}; font-weight: 600; font-size: 12px; border: none;")

        col.addWidget(badge, 0, Qt.AlignmentFlag.AlignHCenter)
        col.addWidget(label)
        col.addWidget(value_widget)
        return card

    def _make_operator(self, symbol: str) -> QLabel:
        op = QLabel(symbol, self)
        op.setStyleSheet("color: #cbd5e1; font-size: 44px; font-weight: bold;")
        return op
