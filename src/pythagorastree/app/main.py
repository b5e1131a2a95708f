"""
Run with: python -m pythagorastree.app.main
"""
from __future__ import annotations

import logging
import sys

from pythagorastree.app.application import create_app
from pythagorastree.app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    app = create_app()
    win = MainWindow()
    win.show()
    logger.info("Main window shown, entering event loop.")
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
