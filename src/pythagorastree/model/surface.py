"""
Render surface contract.

The tree renderer never talks to Qt directly. It issues canvas-style path
commands to anything implementing `Surface`: the preview widget adapts a
QPainter to it, tests use `SegmentRecorder` to capture strokes instead of pixels.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pythagorastree.model.geometry_primitives import Line, Point


class Surface(Protocol):
    """A drawable 2D surface with a single default stroke style."""
    def set_size(self, width: float, height: float) -> None: ...
    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def stroke(self) -> None: ...
    def close_path(self) -> None: ...


@dataclass
class SegmentRecorder:
    """
    Surface that records stroked segments.

    Setting the size clears everything recorded so far, like resizing an HTML canvas.
    Only paths that are stroked end up in `segments`.
    """
    width: float = 0.0
    height: float = 0.0
    segments: list[Line] = field(default_factory=list)
    _path: list[Point] = field(default_factory=list, repr=False)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.segments.clear()
        self._path.clear()

    def begin_path(self) -> None:
        self._path.clear()

    def move_to(self, x: float, y: float) -> None:
        self._path.append(Point(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.append(Point(x, y))

    def stroke(self) -> None:
        for start, end in zip(self._path[:-1], self._path[1:]):
            self.segments.append(Line(start=start, end=end))

    def close_path(self) -> None:
        self._path.clear()
