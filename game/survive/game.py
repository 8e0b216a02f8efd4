"""
Game orchestrator
-----------------
Owns the GameState and the task scheduler, and composes the wave generator,
spawn scheduler, motion engine and particle system behind a small command
surface:

- start():             new session, wave 1, timers armed
- tick():              one frame of motion, collision and wave bookkeeping
- defend():            clear every active enemy and score
- advance_particles(): one particle decay step (also runs on its own timer)
- update(dt):          advance the timers by dt, then tick()

Gameplay policies: at most one enemy is alive at a time, and
at most one collision is resolved per tick (scan stops at the first hit).
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from .entities import Viewport
from .motion import move_towards
from .particles import ParticleSystem
from .scheduler import Task, TaskScheduler
from .spawner import SpawnScheduler
from .state import GameState
from .utils import distance, make_rng
from .waves import create_wave


class Game:
    """Single-writer simulation core for one player"""

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        collision_radius: float = 60.0,
        contact_damage: int = 10,
        defend_score: int = 100,
        max_combo: int = 8,
        shockwave_strength: float = 100.0,
        next_wave_delay: float = 1.5,  # seconds
        particle_interval: float = 0.016,  # seconds
        max_particles: int = 100,
        burst_size: int = 20,
        spawn_offset: float = 50.0,
        auto_advance: bool = False,
    ):
        if particle_interval <= 0:
            raise ValueError(f"particle_interval must be > 0, got {particle_interval}")
        if next_wave_delay < 0:
            raise ValueError(f"next_wave_delay must be >= 0, got {next_wave_delay}")

        self.collision_radius = collision_radius
        self.contact_damage = contact_damage
        self.defend_score = defend_score
        self.max_combo = max_combo
        self.shockwave_strength = shockwave_strength
        self.next_wave_delay = next_wave_delay
        self.particle_interval = particle_interval
        self.auto_advance = auto_advance

        self.rng = make_rng(seed, rng)
        self.clock = TaskScheduler()
        self.state = GameState(viewport=Viewport(width, height))
        self.particles = ParticleSystem(self.rng, max_particles=max_particles, burst_size=burst_size)
        self.spawner = SpawnScheduler(self.clock, self.rng, offset=spawn_offset)

        self._particle_task: Optional[Task] = None
        self._next_wave_task: Optional[Task] = None
        # Bumped by start(); deferred callbacks from older sessions are ignored
        self._session = 0

    # ----------------------------
    # Commands
    # ----------------------------

    def start(self):
        self.clock.cancel_all()
        self.spawner.disarm()
        self._particle_task = None
        self._next_wave_task = None
        self._session += 1

        s = self.state
        s.reset()
        s.is_playing = True
        logger.info("Game started (session {})", self._session)

        self.start_new_wave()
        self._particle_task = self.clock.schedule_interval(self.particle_interval, self.advance_particles)

    def start_new_wave(self):
        s = self.state
        if not s.is_playing:
            return

        if self._next_wave_task is not None:
            self._next_wave_task.cancel()
        self._next_wave_task = None
        s.wave_number += 1
        s.wave = create_wave(s.wave_number)
        s.is_wave_complete = False
        self.spawner.arm(s)

        logger.info(
            "Wave {} started: {} enemies, speed {:.1f}, spawn every {:.2f}s",
            s.wave.number, s.wave.enemies_remaining, s.wave.enemy_speed, s.wave.spawn_interval,
        )

    def tick(self):
        s = self.state
        if s.game_over or not s.is_playing:
            return

        if s.shockwave > 0:
            s.shockwave = max(s.shockwave - 1, 0.0)

        tx, ty = s.viewport.target
        for index, enemy in enumerate(s.enemies):
            # Range is checked from where the enemy stood at the start of the tick
            ox, oy = enemy.x, enemy.y
            moved = move_towards(enemy, tx, ty)
            if not moved or distance(ox, oy, tx, ty) < self.collision_radius:
                self._breach(index, ox, oy)
                break

        if s.wave is not None and s.wave.enemies_remaining == 0 and not s.enemies and not s.is_wave_complete:
            s.is_wave_complete = True
            logger.info("Wave {} complete", s.wave_number)

        if self.auto_advance and s.is_wave_complete and not s.game_over:
            self._schedule_next_wave()

    def defend(self) -> int:
        """Clear all active enemies; returns the points scored"""
        s = self.state
        if s.game_over or not s.is_playing or not s.enemies:
            return 0

        s.shockwave = self.shockwave_strength
        for enemy in s.enemies:
            self.particles.spawn_burst(s.particles, enemy.x, enemy.y, next_id=s.next_id)

        points = self.defend_score * s.wave_number * s.combo_multiplier
        s.score += points
        s.enemies_defeated += len(s.enemies)
        s.enemies.clear()
        s.combo_multiplier = min(s.combo_multiplier + 1, self.max_combo)

        logger.debug("Defend scored {} (combo now x{})", points, s.combo_multiplier)

        if s.enemies_remaining == 0:
            self._schedule_next_wave()
        return points

    def advance_particles(self):
        if self.state.game_over:
            return
        self.particles.advance(self.state.particles)

    def end_game(self):
        s = self.state
        s.game_over = True
        s.is_playing = False

        self.spawner.disarm()
        for task in (self._particle_task, self._next_wave_task):
            if task is not None:
                task.cancel()
        self._particle_task = None
        self._next_wave_task = None

        logger.info("Game over: score {}, reached wave {}", s.score, s.wave_number)

    # ----------------------------
    # Time and geometry
    # ----------------------------

    def advance_time(self, dt: float):
        """Run every timer that comes due within the next `dt` seconds"""
        self.clock.advance(dt)

    def update(self, dt: float = 1 / 60):
        self.advance_time(dt)
        self.tick()

    def set_viewport(self, width: float, height: float, target: Optional[Tuple[float, float]] = None):
        if target is None:
            self.state.viewport = Viewport(width, height)
        else:
            self.state.viewport = Viewport(width, height, target[0], target[1])

    def snapshot(self) -> Dict[str, Any]:
        return self.state.snapshot()

    # ----------------------------
    # Internals
    # ----------------------------

    def _breach(self, index: int, x: float, y: float):
        s = self.state
        enemy = s.enemies.pop(index)
        s.health = max(s.health - self.contact_damage, 0)
        s.breaches += 1
        self.particles.spawn_burst(s.particles, x, y, next_id=s.next_id)

        logger.debug("Enemy {} reached the center, health {}", enemy.id, s.health)

        if s.health <= 0:
            self.end_game()

    def _schedule_next_wave(self):
        if self._next_wave_task is not None and not self._next_wave_task.cancelled:
            return

        session = self._session

        def _deferred_start():
            if session != self._session or not self.state.is_playing:
                return
            self.start_new_wave()

        self._next_wave_task = self.clock.schedule(self.next_wave_delay, _deferred_start)
