"""
Straight-line enemy motion toward the target point.
"""

from .entities import Enemy

ROTATION_STEP = 2.0  # degrees per tick, cosmetic


def move_towards(enemy: Enemy, tx: float, ty: float) -> bool:
    """
    Advance `enemy` by its speed along the direction to (tx, ty).

    Returns False without moving when the enemy already sits on the target;
    the caller resolves that as a collision.
    """
    dx = tx - enemy.x
    dy = ty - enemy.y
    dist = (dx * dx + dy * dy) ** 0.5
    if dist == 0.0:
        return False

    enemy.x += dx / dist * enemy.speed
    enemy.y += dy / dist * enemy.speed
    enemy.rotation += ROTATION_STEP
    return True
