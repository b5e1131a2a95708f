"""
Left-side panels of the work area.

Each panel receives the global `Store` and talks to the preview only through it.
"""
from __future__ import annotations

from pythagorastree.app.ui.panels.base import BasePanel
from pythagorastree.app.ui.panels.parameters import ParameterPanel

__all__ = ["BasePanel", "ParameterPanel"]
