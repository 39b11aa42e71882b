"""Gymnasium environments for Gotris."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the single-piece falling-block environment (6 discrete actions)
register(
    id="Gotris-10x20-v0",
    entry_point="gotris.env.gotris_env:GotrisEnv",
)

__all__ = ["Gotris-10x20-v0"]
