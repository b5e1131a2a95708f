"""
Main window: parameter panel on the left, tree preview on the right,
rectangle count in the status bar.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QStatusBar, QLabel

from pythagorastree.app.application import VISIBLE_APP_NAME
from pythagorastree.app.state import Store
from pythagorastree.app.ui.panels.parameters import ParameterPanel
from pythagorastree.app.ui.workarea import WorkArea
from pythagorastree.config import WINDOW_SIZE

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Global store
        self.store = store if store is not None else Store()

        self.work_area = WorkArea(self)
        self.setCentralWidget(self.work_area)

        self.parameter_panel = ParameterPanel(self.store, parent=self)
        self.work_area.panel_stack.addWidget(self.parameter_panel)
        self.work_area.set_panel_index(0)

        self.status_label = QLabel(self)
        status = QStatusBar(self)
        status.addPermanentWidget(self.status_label)
        self.setStatusBar(status)

        # Store -> preview; preview -> status bar
        preview = self.work_area.preview
        self.store.parameters_changed.connect(preview.set_parameters)
        preview.rendered.connect(self._on_rendered)
        preview.set_parameters(self.store.parameters)

        logger.debug("Main window created with %s", self.store.parameters)

    @Slot(int)
    def _on_rendered(self, rectangles: int) -> None:
        self.status_label.setText(self.tr("Rectangles: {n}").format(n=rectangles))
