"""
Circular collision checks between the ship, bullets and asteroids
"""

from .entities import GameState, World
from .utils import objects_collide

ASTEROID_REWARD = 10


def check_ship_collision(world: World) -> bool:
    """End the game on the first asteroid (in list order) overlapping the ship"""
    for asteroid in world.asteroids:
        if objects_collide(world.ship, asteroid):
            world.state = GameState.GAME_OVER
            return True
    return False


def check_bullet_collisions(world: World, reward: int = ASTEROID_REWARD) -> int:
    """
    Destroy bullet/asteroid pairs that overlap.

    Each bullet takes out at most one asteroid. Both lists are scanned by
    descending index so deletions never shift an element that is still to
    be visited. Returns the number of asteroids destroyed.
    """
    bullets = world.bullets
    asteroids = world.asteroids
    destroyed = 0

    for i in range(len(bullets) - 1, -1, -1):
        for j in range(len(asteroids) - 1, -1, -1):
            if objects_collide(bullets[i], asteroids[j]):
                del asteroids[j]
                del bullets[i]
                world.score += reward
                destroyed += 1
                break

    return destroyed


def check_collisions(world: World, reward: int = ASTEROID_REWARD) -> int:
    """Ship first; a ship hit ends the game and skips the bullet pass"""
    if check_ship_collision(world):
        return 0
    return check_bullet_collisions(world, reward)
