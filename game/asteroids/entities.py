"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class GameState(Enum):
    """Win/loss state of a game. GAME_OVER is terminal."""
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameObject:
    """Movable circular body"""
    x: float
    y: float
    radius: float
    dx: float = 0.0
    dy: float = 0.0

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")


@dataclass
class Ship(GameObject):
    """Player ship"""
    radius: float = 20.0
    rotation: float = 0.0  # radians


@dataclass
class Asteroid(GameObject):
    """Asteroid drifting across the field"""


@dataclass
class Bullet(GameObject):
    """Bullet projectile entity"""
    radius: float = 3.0
    lifespan: int = 60  # frames


@dataclass
class World:
    """
    All mutable game state for one session.

    Passed by reference into physics, collisions, spawner, input and
    renderer functions so none of them hold hidden state of their own.
    """
    ship: Ship
    width: int = 800
    height: int = 600
    asteroids: List[Asteroid] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    score: int = 0
    state: GameState = GameState.RUNNING

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER
