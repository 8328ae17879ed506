"""
Shared fixtures: a recording drawing surface and fake host clock/keyboard.
"""
import pytest

from game.asteroids.engine import Engine
from game.asteroids.entities import Ship, World


class RecordingSurface:
    """Drawing surface that logs every call as (name, args)."""

    def __init__(self):
        self.available = True
        self.calls = []

    def clear(self):
        self.calls.append(("clear", ()))

    def draw_polygon_outline(self, points, color):
        self.calls.append(("polygon_outline", (list(points), color)))

    def draw_circle_outline(self, x, y, radius, color):
        self.calls.append(("circle_outline", (x, y, radius, color)))

    def draw_circle_filled(self, x, y, radius, color):
        self.calls.append(("circle_filled", (x, y, radius, color)))

    def draw_text(self, text, x, y, color, size=14):
        self.calls.append(("text", (text, x, y, color, size)))

    def names(self):
        return [name for name, _ in self.calls]

    def texts(self):
        return [args[0] for name, args in self.calls if name == "text"]


class FakeClock:
    """pyglet-style clock that only ticks when told to."""

    def __init__(self):
        self.scheduled = {}
        self.unschedule_calls = 0

    def schedule_interval(self, func, interval):
        self.scheduled[func] = interval

    def unschedule(self, func):
        self.unschedule_calls += 1
        self.scheduled.pop(func, None)

    def fire(self, n=1):
        for _ in range(n):
            for func in list(self.scheduled):
                func(1 / 60)


class FakeKeyboard:
    """pyglet-style event dispatcher with a single handler stack."""

    def __init__(self):
        self.handlers = []
        self.remove_calls = 0

    def push_handlers(self, **handlers):
        self.handlers.append(handlers)

    def remove_handlers(self, **handlers):
        self.remove_calls += 1
        if handlers in self.handlers:
            self.handlers.remove(handlers)

    def press(self, key, modifiers=0):
        for frame in list(self.handlers):
            handler = frame.get("on_key_press")
            if handler is not None:
                handler(key, modifiers)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def world():
    """Empty 800x600 world, ship in the centre, no asteroids."""
    return World(ship=Ship(x=400.0, y=300.0))


@pytest.fixture
def engine(surface):
    """Seeded engine with the initial asteroid population."""
    return Engine(surface=surface, seed=1234)


@pytest.fixture
def empty_engine(surface):
    """Engine without any asteroids, for hand-built scenarios."""
    eng = Engine(surface=surface, seed=1234)
    eng.asteroids = []
    return eng
