"""
Off-screen drawing surface backed by a numpy RGB array.

Used for rgb_array rendering of the environment and for headless tests.
Text is recorded rather than rasterised.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

Color = Tuple[int, int, int]

BG_C = (0, 0, 0)


class ArraySurface:
    """(height, width, 3) uint8 frame, canvas coordinates (y down)"""

    def __init__(self, width: int = 800, height: int = 600, line_width: float = 1.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.line_width = line_width
        self.available = True
        self.frame = np.zeros((height, width, 3), dtype=np.uint8)
        self.texts: List[Tuple[str, float, float]] = []

        # Pixel-centre grids, reused by every circle draw
        self._ys, self._xs = np.mgrid[0:height, 0:width] + 0.5

    def clear(self):
        self.frame[:] = BG_C
        self.texts = []

    def _dist(self, x: float, y: float) -> np.ndarray:
        return np.hypot(self._xs - x, self._ys - y)

    def draw_circle_filled(self, x: float, y: float, radius: float, color: Color):
        self.frame[self._dist(x, y) <= radius] = color

    def draw_circle_outline(self, x: float, y: float, radius: float, color: Color):
        ring = np.abs(self._dist(x, y) - radius) <= self.line_width / 2
        self.frame[ring] = color

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: Color):
        n = int(max(abs(x2 - x1), abs(y2 - y1))) + 2
        xs = np.floor(np.linspace(x1, x2, n)).astype(int)
        ys = np.floor(np.linspace(y1, y2, n)).astype(int)
        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        self.frame[ys[inside], xs[inside]] = color

    def draw_polygon_outline(self, points: Sequence[Tuple[float, float]], color: Color):
        for i in range(len(points)):
            x1, y1 = points[i]
            x2, y2 = points[(i + 1) % len(points)]
            self.draw_line(x1, y1, x2, y2, color)

    def draw_text(self, text: str, x: float, y: float, color: Color, size: float = 14):
        self.texts.append((text, x, y))

    def to_array(self) -> np.ndarray:
        return self.frame.copy()
