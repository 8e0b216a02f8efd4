"""
SurviveEnv - Gymnasium wrapper around the Click-to-Survive core
---------------------------------------------------------------
- One Game instance, stepped at a fixed dt (60 Hz by default)
- Discrete action space: 0 = wait, 1 = defend
- Vector observation: player state + the active enemy + wave progress
- Reward from score gained, breaches taken and wasted defends
- Optional Arcade window for human rendering (see window.py)

Install:
    pip install gymnasium arcade numpy loguru

Quick test:
    python -m game.survive.survive_env
"""

from __future__ import annotations

import math
import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .game import Game
from .state import MAX_HEALTH
from .utils import clamp, distance, seed_everything
from .waves import MAX_ENEMY_COUNT

DEFAULT_REWARD = {
    "R_SCORE": 0.01,       # per point scored
    "R_BREACH": 1.0,       # per enemy reaching the center
    "R_DEFEND_MISS": 0.05,  # defend pressed with nothing to clear
    "R_DEATH": 5.0,
}

# Normalization ceilings for the observation vector
MAX_WAVE_OBS = 20
MAX_SPEED_OBS = 15.0


class SurviveEnv(gym.Env):
    """Defend-timing environment: learn when to press the button"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        auto_advance: bool = True,
        reward_weights: Optional[Dict[str, float]] = None,
        game_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.auto_advance = auto_advance
        self.reward_weights = dict(DEFAULT_REWARD)
        if reward_weights:
            self.reward_weights.update(reward_weights)

        self.action_space = spaces.Discrete(2)

        # health(1) combo(1) wave(1) enemy present(1) enemy rel pos(2)
        # distance(1) speed(1) remaining(1) wave complete(1)
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(10,), dtype=np.float32)

        self.game = Game(width=width, height=height, auto_advance=auto_advance, **(game_config or {}))
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.game.rng.seed(seed)

        self._step_count = 0
        self.game.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        s = self.game.state
        score_before = s.score
        breaches_before = s.breaches

        missed = False
        if int(action) == 1:
            missed = not s.enemies
            self.game.defend()

        self.game.update(self.dt)
        self._step_count += 1

        reward = self._compute_reward(
            scored=s.score - score_before,
            breaches=s.breaches - breaches_before,
            missed=missed,
        )

        terminated = s.game_over
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.game.state
        tx, ty = s.viewport.target

        health = s.health / MAX_HEALTH
        combo = (s.combo_multiplier - 1) / max(1, self.game.max_combo - 1)
        wave = clamp(s.wave_number / MAX_WAVE_OBS, 0.0, 1.0)
        remaining = s.enemies_remaining / MAX_ENEMY_COUNT

        obs_parts = [
            health * 2 - 1,
            combo * 2 - 1,
            wave * 2 - 1,
        ]

        if s.enemies:
            e = s.enemies[0]
            diag = math.hypot(self.width, self.height)
            obs_parts += [
                1.0,
                clamp((e.x - tx) / self.width, -1, 1),
                clamp((e.y - ty) / self.height, -1, 1),
                clamp(distance(e.x, e.y, tx, ty) / diag, 0, 1) * 2 - 1,
                clamp(e.speed / MAX_SPEED_OBS, 0, 1) * 2 - 1,
            ]
        else:
            obs_parts += [-1.0, 0.0, 0.0, -1.0, -1.0]

        obs_parts += [
            remaining * 2 - 1,
            1.0 if s.is_wave_complete else -1.0,
        ]
        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, scored: int, breaches: int, missed: bool) -> float:
        w = self.reward_weights
        reward = 0.0

        reward += w["R_SCORE"] * scored
        reward -= w["R_BREACH"] * breaches
        if missed:
            reward -= w["R_DEFEND_MISS"]
        if self.game.state.game_over:
            reward -= w["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        s = self.game.state
        return {
            "score": s.score,
            "health": s.health,
            "wave": s.wave_number,
            "combo": s.combo_multiplier,
            "enemies_defeated": s.enemies_defeated,
            "breaches": s.breaches,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import SurviveWindow
            self._window = SurviveWindow(self.game, self.width, self.height)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run an episode with random defends"""
    env = SurviveEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    while not (terminated or truncated):
        # Defend on roughly 2% of frames
        action = 1 if env.np_random.random() < 0.02 else 0
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}  score: {info['score']}  wave: {info['wave']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
