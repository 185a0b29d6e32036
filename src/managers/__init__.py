"""Manager classes for reward state."""

from src.managers.reward_manager import RewardManager, rewards_for_wave

__all__ = [
    "RewardManager",
    "rewards_for_wave",
]
