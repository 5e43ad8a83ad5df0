"""
Application Initialization
==========================
This module constructs the Store/View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Creates the QApplication.
3. Instantiates the Main Window, which owns the Store.
"""
import logging
import sys

from numberline.app.application import create_app
from numberline.app.ui.main_window import MainWindow
from numberline.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    # Use logging.DEBUG to trace rejected edits and focus changes
    setup_logging(level=logging.INFO)

    app = create_app()

    window = MainWindow()
    window.show()
    logger.info("Window shown, ruler width %s.", window.store.config.canvas_width)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
