"""
Wave progression: maps a wave number to its spawn parameters.
"""

from .entities import Wave

BASE_SPEED = 3.0
SPEED_PER_WAVE = 0.5
BASE_ENEMY_COUNT = 5
MAX_ENEMY_COUNT = 15
BASE_SPAWN_INTERVAL = 1.5  # seconds
INTERVAL_PER_WAVE = 0.1
MIN_SPAWN_INTERVAL = 0.5


def create_wave(number: int) -> Wave:
    """
    Build wave `number`.

    Speed grows by 0.5 per wave, the enemy count by one up to 15, and the spawn
    interval shrinks by 0.1 s down to 0.5 s.
    """
    return Wave(
        number=number,
        enemies_remaining=min(BASE_ENEMY_COUNT + number, MAX_ENEMY_COUNT),
        enemy_speed=BASE_SPEED + number * SPEED_PER_WAVE,
        spawn_interval=max(BASE_SPAWN_INTERVAL - number * INTERVAL_PER_WAVE, MIN_SPAWN_INTERVAL),
    )
