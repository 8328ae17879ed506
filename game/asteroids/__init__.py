"""Asteroids module - real-time arcade simulation engine"""

from .engine import Engine
from .entities import Asteroid, Bullet, GameObject, GameState, Ship, World
from .asteroids_env import AsteroidsEnv, run_random_episode

__all__ = [
    'Engine', 'AsteroidsEnv', 'run_random_episode',
    'GameObject', 'Ship', 'Asteroid', 'Bullet', 'World', 'GameState',
]
