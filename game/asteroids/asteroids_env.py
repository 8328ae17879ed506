"""
AsteroidsEnv - Gymnasium wrapper around the asteroids engine
------------------------------------------------------------
- Discrete action space: 0 noop, 1 rotate left, 2 rotate right, 3 thrust, 4 fire
- One env step = one key press (or none) followed by one engine tick
- Vector observation: ship state + K nearest asteroids
- Reward: kill reward per destroyed asteroid, death penalty, small time penalty

Install:
    pip install gymnasium numpy

Quick test:
    python -m game.asteroids.asteroids_env
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .engine import Engine
from .surfaces import ArraySurface

ACTION_KEYS = [None, "left", "right", "up", "space"]

DEFAULT_REWARDS = {
    "R_KILL": 1.0,
    "R_DEATH": 5.0,
    "R_TIME": 0.001,
}


class AsteroidsEnv(gym.Env):
    """Single-ship asteroids environment"""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_asteroids: int = 5,
        max_speed: float = 10.0,
        rewards: Optional[Dict[str, float]] = None,
        engine_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode!r}"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.max_speed = max_speed
        self.rewards = dict(DEFAULT_REWARDS)
        if rewards:
            self.rewards.update(rewards)
        self.engine_config = dict(engine_config or {})

        self.action_space = spaces.Discrete(len(ACTION_KEYS))

        # Ship: pos(2) vel(2) heading cos/sin(2)
        # Each asteroid: rel pos(2) rel vel(2) radius(1)
        obs_dim = 6 + self.k_asteroids * 5
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._surface = ArraySurface(width, height) if render_mode == "rgb_array" else None
        self.engine: Engine = None  # type: ignore
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        # Derive the spawner's RNG from gym's seeded generator
        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.engine = Engine(
            surface=self._surface,
            width=self.width,
            height=self.height,
            rng=rng,
            **self.engine_config,
        )
        # Draw the opening frame so render() before the first step is current
        self.engine.renderer.render(self.engine.world, self._surface)
        self._step_count = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        key = ACTION_KEYS[int(action)]
        score_before = self.engine.score
        was_over = self.engine.game_over

        if key is not None:
            self.engine.on_key_press(key)
        self.engine.tick()
        self._step_count += 1

        kills = (self.engine.score - score_before) // self.engine.asteroid_reward
        terminated = self.engine.game_over
        truncated = self._step_count >= self.max_steps

        reward = self.rewards["R_KILL"] * kills - self.rewards["R_TIME"]
        if terminated and not was_over:
            reward -= self.rewards["R_DEATH"]

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    def render(self):
        if self.render_mode == "rgb_array":
            return self._surface.to_array()
        return None

    def close(self):
        if self.engine is not None:
            self.engine.stop()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        ship = self.engine.ship
        w, h, v = self.width, self.height, self.max_speed

        obs_parts = [ship.x / w * 2 - 1, ship.y / h * 2 - 1,
                     ship.dx / v, ship.dy / v,
                     math.cos(ship.rotation), math.sin(ship.rotation)]

        nearest = sorted(
            self.engine.asteroids,
            key=lambda a: (a.x - ship.x) ** 2 + (a.y - ship.y) ** 2
        )
        for i in range(self.k_asteroids):
            if i < len(nearest):
                a = nearest[i]
                obs_parts += [(a.x - ship.x) / w, (a.y - ship.y) / h,
                              (a.dx - ship.dx) / v, (a.dy - ship.dy) / v,
                              a.radius / 40.0]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        return np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.engine.score,
            "game_over": self.engine.game_over,
            "num_asteroids": len(self.engine.asteroids),
            "num_bullets": len(self.engine.bullets),
            "step": self._step_count,
        }


def run_random_episode(seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = AsteroidsEnv()
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f}  score: {info['score']}  steps: {info['step']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode()
