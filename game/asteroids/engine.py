"""
Engine - fixed-cadence game loop and Running/GameOver state machine
-------------------------------------------------------------------
- Owns the World (ship, asteroids, bullets, score, state)
- tick(): physics -> collisions -> spawn -> render
- start()/stop(): registers one timer and one key-down listener with the
  host and releases both exactly once

The host objects follow the pyglet conventions that Arcade builds on:

    clock.schedule_interval(func, interval) / clock.unschedule(func)
    keyboard.push_handlers(on_key_press=...) / keyboard.remove_handlers(on_key_press=...)

Any dt passed by the clock is ignored: every tick advances the simulation
by exactly one frame.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

from .collisions import check_collisions, ASTEROID_REWARD
from .entities import GameState, Ship, World
from .input_handler import handle_key
from .physics import step
from .renderer import Renderer
from .spawner import MIN_ASTEROIDS, seed_asteroids, top_up


class Engine:
    """Asteroids simulation driven by a periodic timer"""

    def __init__(
        self,
        surface=None,
        width: int = 800,
        height: int = 600,
        fps: int = 60,
        min_asteroids: int = MIN_ASTEROIDS,
        asteroid_reward: int = ASTEROID_REWARD,
        ship_radius: float = 20.0,
        seed: Optional[int] = None,
        rng=None,
        verbose: int = 0,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")

        self.surface = surface
        self.width = width
        self.height = height
        self.fps = fps
        self.min_asteroids = min_asteroids
        self.asteroid_reward = asteroid_reward
        self.ship_radius = ship_radius
        self.verbose = verbose

        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

        self.renderer = Renderer()
        self.tick_count = 0

        # Host registrations, set between start() and stop()
        self._clock = None
        self._keyboard = None
        self._keymap: Optional[Dict[Any, str]] = None

        self.world: World = None  # type: ignore
        self.reset()

    # ----------------------------
    # Readout
    # ----------------------------

    @property
    def ship(self):
        return self.world.ship

    @property
    def asteroids(self):
        return self.world.asteroids

    @asteroids.setter
    def asteroids(self, value):
        self.world.asteroids = list(value)

    @property
    def bullets(self):
        return self.world.bullets

    @bullets.setter
    def bullets(self, value):
        self.world.bullets = list(value)

    @property
    def score(self) -> int:
        return self.world.score

    @property
    def state(self) -> GameState:
        return self.world.state

    @property
    def game_over(self) -> bool:
        return self.world.game_over

    @property
    def interval(self) -> float:
        return 1.0 / self.fps

    @property
    def running(self) -> bool:
        """True while the timer and key listener are registered"""
        return self._clock is not None

    # ----------------------------
    # Simulation
    # ----------------------------

    def reset(self, seed_population: bool = True):
        """Fresh world: ship in the centre, initial asteroid population"""
        ship = Ship(x=self.width / 2, y=self.height / 2, radius=self.ship_radius)
        self.world = World(ship=ship, width=self.width, height=self.height)
        self.tick_count = 0
        if seed_population:
            seed_asteroids(self.world, self.min_asteroids, self.rng)
        return self.world

    def tick(self, dt: Optional[float] = None) -> bool:
        """
        Advance one frame. A no-op once the game is over, so the last
        rendered frame stays on screen. Returns True if the world advanced.
        """
        world = self.world
        if world.game_over:
            return False

        step(world)
        check_collisions(world, self.asteroid_reward)
        top_up(world, self.min_asteroids, self.rng)
        self.renderer.render(world, self.surface)
        self.tick_count += 1

        if world.game_over and self.verbose > 0:
            print(f"[Engine] Game over at tick {self.tick_count}, score {world.score}")
        return True

    def on_key_press(self, key, modifiers: int = 0):
        """Key-down callback. Maps host key codes through the keymap, if any."""
        if self._keymap is not None:
            key = self._keymap.get(key)
            if key is None:
                return None
        handle_key(self.world, key)
        return None

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def start(self, clock, keyboard=None, keymap: Optional[Dict[Any, str]] = None):
        """Register the tick timer and the key-down listener"""
        if self.running:
            return

        self._keymap = keymap
        clock.schedule_interval(self.tick, self.interval)
        self._clock = clock
        if keyboard is not None:
            keyboard.push_handlers(on_key_press=self.on_key_press)
            self._keyboard = keyboard

        if self.verbose > 0:
            print(f"[Engine] Started at {self.fps} ticks/s")

    def stop(self):
        """Release the timer and listener. Safe to call repeatedly or before start()."""
        clock, keyboard = self._clock, self._keyboard
        self._clock = None
        self._keyboard = None
        self._keymap = None

        if clock is not None:
            clock.unschedule(self.tick)
        if keyboard is not None:
            keyboard.remove_handlers(on_key_press=self.on_key_press)

        if clock is not None and self.verbose > 0:
            print(f"[Engine] Stopped after {self.tick_count} ticks")

    dispose = stop

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
