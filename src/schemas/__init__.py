"""Reward file schemas."""

from src.schemas.rewards import ArenaRewards, RewardFile, WaveRewards

__all__ = [
    "ArenaRewards",
    "RewardFile",
    "WaveRewards",
]
