"""
Arcade frontend: window, drawing surface, clock and keyboard wiring.

Usage:
    python -m game.asteroids [--seed N] [--verbose 1]

Controls:
    Left/Right: rotate
    Up: thrust
    Space: fire
"""

from __future__ import annotations

import argparse
from typing import Callable, List, Tuple

import arcade

from .engine import Engine

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
SCREEN_TITLE = "Asteroids"

ARCADE_KEYMAP = {
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.UP: "up",
    arcade.key.SPACE: "space",
}


class ArcadeClock:
    """pyglet-style clock facade over arcade.schedule/unschedule"""

    def schedule_interval(self, func: Callable, interval: float):
        arcade.schedule(func, interval)

    def unschedule(self, func: Callable):
        arcade.unschedule(func)


class ArcadeSurface:
    """
    Buffers one frame of draw calls made during Engine.tick() and replays
    them in the window's on_draw. Converts canvas coordinates (y down) to
    Arcade's (y up).
    """

    def __init__(self, height: int):
        self.height = height
        self.available = True
        self._frame: List[Tuple[Callable, tuple, dict]] = []

    def _y(self, y: float) -> float:
        return self.height - y

    def clear(self):
        self._frame = []

    def draw_polygon_outline(self, points, color):
        pts = [(x, self._y(y)) for x, y in points]
        self._frame.append((arcade.draw_polygon_outline, (pts, color), {}))

    def draw_circle_outline(self, x, y, radius, color):
        self._frame.append((arcade.draw_circle_outline, (x, self._y(y), radius, color), {}))

    def draw_circle_filled(self, x, y, radius, color):
        self._frame.append((arcade.draw_circle_filled, (x, self._y(y), radius, color), {}))

    def draw_text(self, text, x, y, color, size=14):
        self._frame.append((arcade.draw_text, (text, x, self._y(y), color, size),
                            {"anchor_y": "top", "font_name": "Courier New"}))

    def replay(self):
        for func, args, kwargs in self._frame:
            func(*args, **kwargs)


class AsteroidsWindow(arcade.Window):
    """Arcade window hosting one engine for its lifetime"""

    def __init__(self, seed=None, verbose: int = 0):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_TITLE)
        self.background_color = arcade.color.BLACK

        self.surface = ArcadeSurface(SCREEN_HEIGHT)
        self.engine = Engine(
            surface=self.surface,
            width=SCREEN_WIDTH,
            height=SCREEN_HEIGHT,
            seed=seed,
            verbose=verbose,
        )
        self.engine.start(ArcadeClock(), keyboard=self, keymap=ARCADE_KEYMAP)

    def on_draw(self):
        self.clear()
        self.surface.replay()

    def on_close(self):
        self.surface.available = False
        self.engine.stop()
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Play Asteroids")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for asteroid spawning")
    parser.add_argument("--verbose", type=int, default=0, help="Print engine lifecycle events")
    args = parser.parse_args()

    print(__doc__)
    AsteroidsWindow(seed=args.seed, verbose=args.verbose)
    arcade.run()


if __name__ == "__main__":
    main()
