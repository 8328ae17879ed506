"""
Asteroid generation policy
"""

import random

from .entities import Asteroid, World

MIN_ASTEROIDS = 5
MIN_RADIUS = 20.0
RADIUS_RANGE = 20.0
MAX_SPEED = 2.0


def create_asteroid(world: World, rng=random) -> Asteroid:
    """
    Spawn one asteroid on the top or bottom edge and add it to the world.

    x is uniform over the canvas width, radius uniform in [20, 40) and each
    velocity component uniform in [-2, 2). ``rng`` is anything with a
    ``random()`` method (the ``random`` module or a ``random.Random``).
    """
    asteroid = Asteroid(
        x=rng.random() * world.width,
        y=0.0 if rng.random() < 0.5 else float(world.height),
        radius=MIN_RADIUS + rng.random() * RADIUS_RANGE,
        dx=(rng.random() - 0.5) * 2 * MAX_SPEED,
        dy=(rng.random() - 0.5) * 2 * MAX_SPEED,
    )
    world.asteroids.append(asteroid)
    return asteroid


def seed_asteroids(world: World, count: int = MIN_ASTEROIDS, rng=random):
    for _ in range(count):
        create_asteroid(world, rng)


def top_up(world: World, floor: int = MIN_ASTEROIDS, rng=random):
    """Create at most one asteroid if the population is below the floor"""
    if len(world.asteroids) < floor:
        return create_asteroid(world, rng)
    return None
