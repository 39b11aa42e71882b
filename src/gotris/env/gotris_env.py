from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from gotris.game import BOARD_HEIGHT, BOARD_WIDTH, Action, Field, GameConfig, apply_action
from gotris.game.grid import to_array
from gotris.visualization.palette import color_for_value


class GotrisEnv(gym.Env):
    """
    Falling-block environment driven one gravity tick per step.

    Actions (6 total), matching `Action` values:
      0: None
      1: Move Left
      2: Move Right
      3: Rotate
      4: Soft Drop
      5: Hard Drop

    Each step applies the action, then advances the field by one tick. The
    reward is the change in engine score, so a step that clears N rows earns N**2.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.field = Field(self.config)

        self.observation_space = spaces.Box(low=0, high=7, shape=(BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8)
        self.action_space = spaces.Discrete(int(Action.HARD_DROP) + 1)

        self._last_obs: Optional[np.ndarray] = None
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return to_array(self.field.current())

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.field.score,
            "level": self.field.level(),
            "lines_cleared_total": self.field.lines_cleared_total,
            "depth": self.field.depth,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Derive the piece stream from gymnasium's seeded generator
        piece_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.field = Field(self.config, rng=random.Random(piece_seed))
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        score_before = self.field.score
        accepted = apply_action(self.field, Action(int(action)))
        _, game_over = self.field.advance()
        self._steps += 1

        terminated = bool(game_over)
        truncated = self._steps >= self.max_episode_steps
        reward = float(self.field.score - score_before)

        obs = self._get_obs()
        info = self._get_info()
        info["action_accepted"] = accepted
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs if self._last_obs is not None else self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
