"""Services module for loading and converting rewards."""

from src.services.item_parser import parse_item_stack, parse_item_stacks
from src.services.reward_loader import (
    LoadedArena,
    LoadedRewards,
    RewardLoadError,
    load_arena,
    load_reward_file,
    load_rewards,
    parse_descriptor,
)

__all__ = [
    "parse_item_stack",
    "parse_item_stacks",
    "LoadedArena",
    "LoadedRewards",
    "RewardLoadError",
    "load_arena",
    "load_reward_file",
    "load_rewards",
    "parse_descriptor",
]
