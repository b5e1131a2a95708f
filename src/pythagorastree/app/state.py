from __future__ import annotations

import logging
from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from pythagorastree.config import DEFAULT_PARAMETERS
from pythagorastree.model.tree import TreeParameters

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store holding the current tree parameters.

    The parameter record is immutable; every setter swaps it for a new one and
    emits `parameters_changed`, which both the labels and the preview listen to.
    A setter always emits, even for an unchanged value.
    """
    parameters_changed = Signal(object)

    def __init__(self, parameters: TreeParameters | None = None) -> None:
        super().__init__()
        self._parameters = parameters if parameters is not None else DEFAULT_PARAMETERS

    @property
    def parameters(self) -> TreeParameters:
        return self._parameters

    def set_parameters(self, parameters: TreeParameters) -> None:
        self._parameters = parameters
        logger.debug("Parameters changed: %s", parameters)
        self.parameters_changed.emit(self._parameters)

    def set_size(self, value: float) -> None:
        self.set_parameters(replace(self._parameters, size=value))

    def set_depth(self, value: int) -> None:
        self.set_parameters(replace(self._parameters, depth=int(value)))

    def set_x_offset(self, value: float) -> None:
        self.set_parameters(replace(self._parameters, x_offset=value))

    def set_y_offset(self, value: float) -> None:
        self.set_parameters(replace(self._parameters, y_offset=value))

    def set_value(self, key: str, value: float) -> None:
        """Dispatch to the setter of the given parameter key."""
        setters = {
            "size": self.set_size,
            "depth": self.set_depth,
            "x_offset": self.set_x_offset,
            "y_offset": self.set_y_offset,
        }
        if key not in setters:
            raise KeyError(f"Unknown parameter '{key}'")
        setters[key](value)
