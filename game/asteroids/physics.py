"""
Per-tick motion: integration, thrust and the wraparound policies.

Velocities persist until input changes them; there is no friction and no
speed cap. The ship re-enters exactly at the opposite edge, asteroids use
their own radius as a margin so they fully leave the canvas before
reappearing, and bullets never wrap.
"""

import math

from .entities import Asteroid, Bullet, GameObject, Ship, World

THRUST = 0.1


def integrate(obj: GameObject):
    obj.x += obj.dx
    obj.y += obj.dy


def apply_thrust(ship: Ship, k: float = THRUST):
    """Add an impulse of magnitude k along the ship's heading"""
    ship.dx += math.cos(ship.rotation) * k
    ship.dy += math.sin(ship.rotation) * k


def wrap_ship(ship: Ship, width: float, height: float):
    if ship.x < 0:
        ship.x = width
    if ship.x > width:
        ship.x = 0
    if ship.y < 0:
        ship.y = height
    if ship.y > height:
        ship.y = 0


def wrap_asteroid(asteroid: Asteroid, width: float, height: float):
    r = asteroid.radius
    if asteroid.x < -r:
        asteroid.x = width + r
    if asteroid.x > width + r:
        asteroid.x = -r
    if asteroid.y < -r:
        asteroid.y = height + r
    if asteroid.y > height + r:
        asteroid.y = -r


def age_bullet(bullet: Bullet) -> bool:
    """Move a bullet one tick and burn one frame of lifespan. Returns True while alive."""
    integrate(bullet)
    bullet.lifespan = max(0, bullet.lifespan - 1)
    return bullet.lifespan > 0


def step(world: World):
    """Advance every entity in the world by one tick"""
    integrate(world.ship)
    wrap_ship(world.ship, world.width, world.height)

    for asteroid in world.asteroids:
        integrate(asteroid)
        wrap_asteroid(asteroid, world.width, world.height)

    world.bullets[:] = [b for b in world.bullets if age_bullet(b)]
