"""Gymnasium environment wrapper for the minefield.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (agent position, session status, environment config).
Reward is ``+1`` for reaching the goal, ``-1`` for falling into a hazard or
leaving the field, ``0`` otherwise. ``terminated`` is ``True`` on a win,
``truncated`` on a loss.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"agent": {...}, "status": {...}, "config": {...}}}``

Usage:

``env = MinefieldEnv(rows=10, columns=10, hazard_chance=45, seed=0)``

Customization hooks:
    * ``initial_state_fn``: Provide a callable that returns a fully built ``State``.
    * ``render_resolution`` / ``render_color_map`` change the frames.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from grid_minefield.actions import GymAction, MOVE_ACTIONS
from grid_minefield.levels.minefield import generate
from grid_minefield.renderer.image import (
    DEFAULT_COLOR_MAP,
    DEFAULT_RESOLUTION,
    ColorMap,
    ImageRenderer,
    cell_size_for,
)
from grid_minefield.state import State
from grid_minefield.step import step
from grid_minefield.types import Outcome

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]

REWARDS: Dict[Outcome, float] = {
    Outcome.PLAYING: 0.0,
    Outcome.WON: 1.0,
    Outcome.FELL: -1.0,
    Outcome.EXITED: -1.0,
}


def agent_observation_dict(state: State) -> Dict[str, Any]:
    """Agent sub-observation: current cell and number of cells visited."""
    return {
        "row": int(state.position.row),
        "column": int(state.position.column),
        "visited": len(state.visited),
    }


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase, turn)."""
    return {
        "phase": str(state.outcome),
        "turn": int(state.turn),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (move function, seed, dimensions)."""
    move_fn_name = getattr(state.move_fn, "__name__", str(state.move_fn))
    return {
        "move_fn": move_fn_name,
        "seed": state.seed if state.seed is not None else -1,
        "rows": state.rows,
        "columns": state.columns,
    }


class MinefieldEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the minefield.

    Parameters mirror the field generator plus rendering knobs. The action
    space is ``Discrete(len(GymAction))``; see :mod:`grid_minefield.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        render_color_map: ColorMap = DEFAULT_COLOR_MAP,
        initial_state_fn: Callable[..., State] = generate,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a viewer.
            render_resolution: Target width (pixels) of rendered frames.
            render_color_map: Tile to RGBA color mapping.
            initial_state_fn: Callable returning an initial ``State``.
            **kwargs: Forwarded to ``initial_state_fn`` (rows, columns, hazard_chance, seed).
                The callable also receives ``rng``, the episode random stream.
        """
        from gymnasium import spaces

        self._initial_state_fn = initial_state_fn
        self._seed: Optional[int] = kwargs.pop("seed", None)
        self._initial_state_kwargs = kwargs
        self._rng = random.Random(self._seed)

        self.state: Optional[State] = None
        self._renderer = ImageRenderer(
            resolution=render_resolution, color_map=render_color_map
        )
        self._render_mode = render_mode

        # First episode fixes the frame geometry
        self.reset()
        assert self.state is not None
        cell_size = cell_size_for(self.state, render_resolution)
        render_height = self.state.rows * cell_size
        render_width = self.state.columns * cell_size

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        text_space_short = spaces.Text(max_length=32)
        text_space_medium = spaces.Text(max_length=128)

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "agent": spaces.Dict(
                            {
                                "row": int_box(-1, 10_000),
                                "column": int_box(-1, 10_000),
                                "visited": int_box(0, 100_000_000),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "phase": text_space_short,
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "move_fn": text_space_medium,
                                "seed": int_box(-1_000_000_000, 1_000_000_000),
                                "rows": int_box(1, 10_000),
                                "columns": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode on a freshly generated field.

        Arguments:
            seed: Reseeds the field stream. Later resets without a seed keep
                drawing from it, so each episode gets a new field.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
            self._rng = random.Random(seed)
        self.state = self._initial_state_fn(
            **self._initial_state_kwargs, seed=self._seed, rng=self._rng
        )
        logger.debug("Reset to %dx%d field", self.state.rows, self.state.columns)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = MOVE_ACTIONS[int(action)]

        # Nothing more is paid once the episode has ended
        was_terminal = self.state.is_terminal
        self.state = step(self.state, step_action)
        reward = 0.0 if was_terminal else REWARDS[self.state.outcome]
        terminated = self.state.outcome == Outcome.WON
        truncated = self.state.outcome in (Outcome.FELL, Outcome.EXITED)
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "agent": agent_observation_dict(self.state),
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img_np = np.array(self._renderer.render(self.state))
        return {"image": img_np, "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (the terminal message, if any)."""
        assert self.state is not None
        return {"message": self.state.message} if self.state.message else {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
