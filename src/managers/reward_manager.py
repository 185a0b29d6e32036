"""RewardManager for collecting and paying out arena rewards."""

import logging

from src.grantable import Grantable, Recipient, Services
from src.services.reward_loader import LoadedArena

logger = logging.getLogger(__name__)


def rewards_for_wave(arena: LoadedArena, wave: int) -> list[Grantable]:
    """Select the rewards earned by reaching a wave.

    ``every`` rewards fire on each multiple of their interval, ``after``
    rewards fire only on their exact wave. Interval rewards come first.

    Args:
        arena: Parsed arena rewards.
        wave: Wave number just reached (1-based).
    """
    if wave < 1:
        return []

    result: list[Grantable] = []
    for interval, rewards in sorted(arena.every.items()):
        if interval >= 1 and wave % interval == 0:
            result.extend(rewards)
    result.extend(arena.after.get(wave, []))
    return result


class RewardManager:
    """Per-recipient reward bookkeeping for one arena session.

    Rewards are collected while the session runs and granted once, when
    the recipient leaves or the session ends.
    """

    def __init__(self, services: Services | None = None) -> None:
        """Initialize manager.

        Args:
            services: Economy and permission backends used when granting.
        """
        self.services = services
        self._rewards: dict[str, list[Grantable]] = {}
        self._rewarded: set[str] = set()

    def reset(self) -> None:
        """Forget all pending rewards and who has been paid."""
        self._rewards.clear()
        self._rewarded.clear()

    def add_reward(self, recipient_name: str, reward: Grantable) -> None:
        """Queue a reward for a recipient.

        Raises:
            ValueError: If reward is None.
        """
        if reward is None:
            raise ValueError("Rewards cannot be None")
        self._rewards.setdefault(recipient_name, []).append(reward)

    def add_rewards(self, recipient_name: str, rewards: list[Grantable]) -> None:
        for reward in rewards:
            self.add_reward(recipient_name, reward)

    def rewards_for(self, recipient_name: str) -> list[Grantable]:
        """Return the rewards queued for a recipient."""
        return list(self._rewards.get(recipient_name, []))

    def has_been_rewarded(self, recipient_name: str) -> bool:
        return recipient_name in self._rewarded

    def grant_rewards(self, recipient: Recipient) -> bool:
        """Grant all queued rewards to a recipient, at most once.

        Every reward is attempted even if an earlier one fails.

        Returns:
            True if every reward was granted; False if some failed, the
            recipient was already paid, or nothing was queued.
        """
        if recipient.name in self._rewarded:
            logger.debug("%s has already been rewarded", recipient.name)
            return False

        rewards = self._rewards.get(recipient.name)
        if not rewards:
            return False

        success = True
        for reward in rewards:
            if not reward.grant(recipient, self.services):
                logger.warning("Failed to grant %s to %s", reward.to_string(), recipient.name)
                success = False

        self._rewarded.add(recipient.name)
        logger.info("Granted %d rewards to %s", len(rewards), recipient.name)
        return success
