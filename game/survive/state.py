"""
Game state aggregate. The orchestrator is its only writer.
"""

import itertools
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .entities import Enemy, Particle, Viewport, Wave

MAX_HEALTH = 100


@dataclass
class GameState:
    viewport: Viewport
    score: int = 0
    health: int = MAX_HEALTH
    combo_multiplier: int = 1
    wave_number: int = 0
    wave: Optional[Wave] = None
    is_playing: bool = False
    game_over: bool = False
    is_wave_complete: bool = False
    shockwave: float = 0.0
    enemies: List[Enemy] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)

    # Run statistics
    enemies_defeated: int = 0
    breaches: int = 0

    # Entity ids are per session so seeded runs reproduce them
    _ids: Any = field(default_factory=lambda: itertools.count(1), repr=False, compare=False)

    def next_id(self) -> int:
        return next(self._ids)

    @property
    def enemies_remaining(self) -> int:
        return self.wave.enemies_remaining if self.wave is not None else 0

    def reset(self):
        self.score = 0
        self.health = MAX_HEALTH
        self.combo_multiplier = 1
        self.wave_number = 0
        self.wave = None
        self.is_playing = False
        self.game_over = False
        self.is_wave_complete = False
        self.shockwave = 0.0
        self.enemies.clear()
        self.particles.clear()
        self.enemies_defeated = 0
        self.breaches = 0
        self._ids = itertools.count(1)

    def snapshot(self) -> Dict[str, Any]:
        """Copy of everything a presentation layer may read"""
        return {
            "score": self.score,
            "health": self.health,
            "combo_multiplier": self.combo_multiplier,
            "wave_number": self.wave_number,
            "enemies_remaining": self.enemies_remaining,
            "is_playing": self.is_playing,
            "game_over": self.game_over,
            "is_wave_complete": self.is_wave_complete,
            "shockwave": self.shockwave,
            "target": self.viewport.target,
            "enemies": tuple(replace(e) for e in self.enemies),
            "particles": tuple(replace(p) for p in self.particles),
            "enemies_defeated": self.enemies_defeated,
            "breaches": self.breaches,
        }
