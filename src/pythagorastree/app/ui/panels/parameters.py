from __future__ import annotations

from dataclasses import asdict

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSizePolicy, QSlider,
)

from pythagorastree.app.state import Store
from pythagorastree.app.ui.panels.base import BasePanel
from pythagorastree.config import PARAMETER_KEYS, SLIDER_RANGES, format_label
from pythagorastree.model.tree import TreeParameters


class ParameterPanel(BasePanel):
    """
    Panel with one slider per tree parameter.

    Each slider has a label above it showing the current value. Moving a
    slider writes to the store; the labels (and the sliders themselves, for
    changes coming from elsewhere) follow the store's `parameters_changed`.
    """
    TITLE: str = "Tree Parameters"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        box = QGroupBox(self.tr(self.TITLE), self)
        root.addWidget(box, 0)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)

        self._sliders: dict[str, QSlider] = {}
        self._labels: dict[str, QLabel] = {}
        self._row = 0

        for key in PARAMETER_KEYS:
            self._add_slider(key)

        root.addStretch()

        # wiring
        self.store.parameters_changed.connect(self._on_parameters_changed)
        self._on_parameters_changed(self.store.parameters)

    def slider(self, key: str) -> QSlider:
        return self._sliders[key]

    def label(self, key: str) -> QLabel:
        return self._labels[key]

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_slider(self, key: str) -> QSlider:
        min_value, max_value = SLIDER_RANGES[key]

        lab = QLabel(self)
        self.grid.addWidget(lab, self._next_row(), 0)

        w = QSlider(Qt.Orientation.Horizontal, self)
        w.setRange(min_value, max_value)
        w.setSingleStep(1)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        w.valueChanged.connect(lambda value, k=key: self.store.set_value(k, value))
        self.grid.addWidget(w, self._next_row(), 0)

        self._labels[key] = lab
        self._sliders[key] = w
        return w

    @Slot(object)
    def _on_parameters_changed(self, parameters: TreeParameters) -> None:
        values = asdict(parameters)
        for key in PARAMETER_KEYS:
            value = values[key]
            self._labels[key].setText(format_label(key, value))

            slider = self._sliders[key]
            if slider.value() != round(value):
                # keep the slider in sync without echoing back into the store
                slider.blockSignals(True)
                slider.setValue(round(value))
                slider.blockSignals(False)
