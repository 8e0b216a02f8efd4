"""
Spawn scheduler: places one enemy at a time on a random viewport edge.
"""

from __future__ import annotations

import random
from typing import Optional

from loguru import logger

from .entities import Enemy
from .scheduler import Task, TaskScheduler
from .state import GameState

MAX_ENEMY_HEALTH = 3


class SpawnScheduler:
    """
    Repeating spawn task bound to the current wave's interval.

    A call is a no-op while any enemy is alive, so at most one enemy is ever
    active. Once the wave has spawned everything the task cancels itself.
    """

    def __init__(self, clock: TaskScheduler, rng: Optional[random.Random] = None, offset: float = 50.0):
        self.clock = clock
        self.rng = rng or random.Random()
        self.offset = offset
        self._task: Optional[Task] = None

    @property
    def armed(self) -> bool:
        return self._task is not None and not self._task.cancelled

    def arm(self, state: GameState):
        self.disarm()
        self._task = self.clock.schedule_interval(state.wave.spawn_interval, lambda: self.spawn(state))

    def disarm(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def spawn(self, state: GameState) -> Optional[Enemy]:
        wave = state.wave
        if wave is None or wave.enemies_remaining <= 0:
            self.disarm()
            if not state.enemies:
                state.is_wave_complete = True
            return None

        if state.enemies:
            return None

        x, y = self.edge_position(state.viewport.width, state.viewport.height)
        enemy = Enemy(
            x=x,
            y=y,
            speed=wave.enemy_speed,
            health=min(state.wave_number, MAX_ENEMY_HEALTH),
            id=state.next_id(),
        )
        state.enemies.append(enemy)
        wave.enemies_remaining -= 1

        logger.debug(
            "Spawned enemy {} at ({:.1f}, {:.1f}), {} left in wave {}",
            enemy.id, x, y, wave.enemies_remaining, wave.number,
        )
        return enemy

    def edge_position(self, width: float, height: float):
        """Random point just outside one of the four viewport edges"""
        side = self.rng.choice(["top", "right", "bottom", "left"])

        if side == "top":
            return self.rng.uniform(0, width), -self.offset
        elif side == "right":
            return width + self.offset, self.rng.uniform(0, height)
        elif side == "bottom":
            return self.rng.uniform(0, width), height + self.offset
        else:
            return -self.offset, self.rng.uniform(0, height)
