"""
Frame renderer.

Draws the world onto any drawing surface that implements:

    clear()
    draw_polygon_outline(points, color)
    draw_circle_outline(x, y, radius, color)
    draw_circle_filled(x, y, radius, color)
    draw_text(text, x, y, color, size)

All coordinates handed to a surface are canvas coordinates (origin at the
top-left, y pointing down). Per-entity rotation/translation is applied by
the renderer's own transform stack, so surfaces never see transform state.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import List, Sequence, Tuple

import numpy as np

from .entities import World

Point = Tuple[float, float]

# Colors
SHIP_C = (0, 255, 0)
ASTEROID_C = (255, 0, 0)
BULLET_C = (0, 255, 255)
HUD_C = (0, 255, 0)

HUD_X = 10
HUD_Y = 10
HUD_LINE = 20
HUD_FONT_SIZE = 14


class Renderer:
    """Draws ship, asteroids, bullets and the score overlay, in that order"""

    def __init__(self):
        self._stack: List[np.ndarray] = [np.eye(3)]

    # ----------------------------
    # Transform stack
    # ----------------------------

    @property
    def transform(self) -> np.ndarray:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def save(self):
        self._stack.append(self._stack[-1].copy())

    def restore(self):
        if len(self._stack) > 1:
            self._stack.pop()

    def translate(self, tx: float, ty: float):
        m = np.array([[1.0, 0.0, tx],
                      [0.0, 1.0, ty],
                      [0.0, 0.0, 1.0]])
        self._stack[-1] = self._stack[-1] @ m

    def rotate(self, angle: float):
        c, s = math.cos(angle), math.sin(angle)
        m = np.array([[c, -s, 0.0],
                      [s, c, 0.0],
                      [0.0, 0.0, 1.0]])
        self._stack[-1] = self._stack[-1] @ m

    @contextmanager
    def local(self, x: float, y: float, rotation: float = 0.0):
        """Scoped translate-then-rotate; the previous transform is restored on exit"""
        self.save()
        try:
            self.translate(x, y)
            self.rotate(rotation)
            yield self
        finally:
            self.restore()

    def apply(self, points: Sequence[Point]) -> List[Point]:
        pts = np.asarray(points, dtype=float)
        homog = np.hstack([pts, np.ones((len(pts), 1))])
        out = homog @ self.transform.T
        return [(float(px), float(py)) for px, py in out[:, :2]]

    # ----------------------------
    # Drawing
    # ----------------------------

    def render(self, world: World, surface) -> bool:
        """
        Draw one frame. Returns False (and draws nothing) when no surface
        is available, so the caller simply skips the frame. A surface may
        report itself unavailable through an ``available`` attribute.
        """
        if surface is None or not getattr(surface, "available", True):
            return False

        surface.clear()
        self.draw_ship(world, surface)
        self.draw_asteroids(world, surface)
        self.draw_bullets(world, surface)
        self.draw_overlay(world, surface)
        return True

    def draw_ship(self, world: World, surface):
        ship = world.ship
        r = ship.radius
        with self.local(ship.x, ship.y, ship.rotation):
            points = self.apply([(0.0, -r), (-r, r), (r, r)])
        surface.draw_polygon_outline(points, SHIP_C)

    def draw_asteroids(self, world: World, surface):
        for a in world.asteroids:
            surface.draw_circle_outline(a.x, a.y, a.radius, ASTEROID_C)

    def draw_bullets(self, world: World, surface):
        for b in world.bullets:
            surface.draw_circle_filled(b.x, b.y, b.radius, BULLET_C)

    def draw_overlay(self, world: World, surface):
        surface.draw_text(f"Score: {world.score}", HUD_X, HUD_Y, HUD_C, HUD_FONT_SIZE)
        if world.game_over:
            surface.draw_text("Game Over!", HUD_X, HUD_Y + HUD_LINE, HUD_C, HUD_FONT_SIZE)
