"""
Input Handler - translates key presses to ship intents.
Key-down only: rotation and thrust are impulses, not held state.
"""

import math
from enum import Enum
from typing import Optional

from .entities import Bullet, World
from .physics import apply_thrust

ROTATION_STEP = 0.1
BULLET_SPEED = 10.0
BULLET_RADIUS = 3.0
BULLET_LIFESPAN = 60


class Intent(Enum):
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    THRUST = "thrust"
    FIRE = "fire"


# Backend-neutral key names; frontends map their own key codes onto these
KEY_BINDINGS = {
    "left": Intent.ROTATE_LEFT,
    "right": Intent.ROTATE_RIGHT,
    "up": Intent.THRUST,
    "space": Intent.FIRE,
}


def fire_bullet(world: World) -> Bullet:
    """Launch a bullet from the ship's nose along its heading"""
    ship = world.ship
    cos_r = math.cos(ship.rotation)
    sin_r = math.sin(ship.rotation)
    bullet = Bullet(
        x=ship.x + cos_r * ship.radius,
        y=ship.y + sin_r * ship.radius,
        radius=BULLET_RADIUS,
        dx=cos_r * BULLET_SPEED,
        dy=sin_r * BULLET_SPEED,
        lifespan=BULLET_LIFESPAN,
    )
    world.bullets.append(bullet)
    return bullet


def apply_intent(world: World, intent: Intent):
    if world.game_over:
        return

    if intent is Intent.ROTATE_LEFT:
        world.ship.rotation -= ROTATION_STEP
    elif intent is Intent.ROTATE_RIGHT:
        world.ship.rotation += ROTATION_STEP
    elif intent is Intent.THRUST:
        apply_thrust(world.ship)
    elif intent is Intent.FIRE:
        fire_bullet(world)


def handle_key(world: World, key) -> Optional[Intent]:
    """
    Handle a single key press.
    Returns the bound intent, or None for unbound keys.
    """
    intent = KEY_BINDINGS.get(key)
    if intent is not None:
        apply_intent(world, intent)
    return intent
