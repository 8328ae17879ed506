"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x1 - x2, y1 - y2)


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap. Touching circles do not collide."""
    return distance(x1, y1, x2, y2) < r1 + r2


def objects_collide(a, b) -> bool:
    """circle_collide for two GameObjects"""
    return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)

