from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from numberline.config import DEFAULT_RULER, RulerConfig
from numberline.model.scene import SceneState, derive_scene
from numberline.model.validation import accepts_edit

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/ruler sync.

    Holds the two raw input strings. Every accepted edit re-derives the
    scene from scratch; the viewport is only asked to move when the focus
    key (start, delta, validity) actually changes.
    """
    scene_changed = Signal(object)
    focus_changed = Signal(float)

    def __init__(self, config: RulerConfig = DEFAULT_RULER, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.config = config
        self._start_text = ""
        self._delta_text = ""
        self._scene: SceneState = derive_scene("", "", config)

    @property
    def scene(self) -> SceneState:
        return self._scene

    @property
    def start_text(self) -> str:
        return self._start_text

    @property
    def delta_text(self) -> str:
        return self._delta_text

    def set_start_text(self, text: str) -> bool:
        """Store a new start field content. Returns False if the edit was rejected."""
        if not accepts_edit(text):
            logger.debug("Rejected start edit %r, keeping %r.", text, self._start_text)
            return False
        self._recompute(text, self._delta_text)
        return True

    def set_delta_text(self, text: str) -> bool:
        """Store a new movement field content. Returns False if the edit was rejected."""
        if not accepts_edit(text):
            logger.debug("Rejected movement edit %r, keeping %r.", text, self._delta_text)
            return False
        self._recompute(self._start_text, text)
        return True

    def _recompute(self, start_text: str, delta_text: str) -> None:
        # Texts are only committed once their scene derived without error
        scene = derive_scene(start_text, delta_text, self.config)
        previous = self._scene
        self._start_text, self._delta_text, self._scene = start_text, delta_text, scene
        self.scene_changed.emit(self._scene)

        if self._scene.focus_key != previous.focus_key:
            logger.debug(
                "Focus moved to %s (start=%s, delta=%s).",
                self._scene.scroll_target, self._scene.start, self._scene.delta,
            )
            self.focus_changed.emit(self._scene.scroll_target)
