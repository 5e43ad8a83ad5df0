from __future__ import annotations

from PySide6.QtWidgets import QWidget

from numberline.app.state import Store


class BasePanel(QWidget):
    """Base class for the window sections. Holds a reference to the global store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.scene_changed.connect(self.on_scene_changed)

    def on_scene_changed(self, scene) -> None:
        """Override to refresh from a freshly derived SceneState."""
