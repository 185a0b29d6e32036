"""Tests for RewardManager."""

import pytest

from src.grantable import Currency, Item, Permission
from src.managers.reward_manager import RewardManager, rewards_for_wave
from src.services.reward_loader import LoadedArena


@pytest.fixture
def arena() -> LoadedArena:
    """Arena with interval and one-off wave rewards."""
    return LoadedArena(
        name="default",
        every={2: [Currency(1.0)], 3: [Currency(5.0)]},
        after={6: [Permission("arena.vip")]},
    )


@pytest.fixture
def manager(services) -> RewardManager:
    return RewardManager(services=services)


class TestRewardsForWave:
    """Tests for wave reward selection."""

    def test_every_fires_on_multiples(self, arena):
        """Interval rewards should fire on every multiple."""
        assert rewards_for_wave(arena, 2) == [Currency(1.0)]
        assert rewards_for_wave(arena, 3) == [Currency(5.0)]
        assert rewards_for_wave(arena, 4) == [Currency(1.0)]

    def test_after_fires_once(self, arena):
        """One-off rewards should come after interval rewards."""
        assert rewards_for_wave(arena, 6) == [Currency(1.0), Currency(5.0), Permission("arena.vip")]
        assert Permission("arena.vip") not in rewards_for_wave(arena, 12)

    def test_zero_interval_ignored(self):
        """Intervals below one should never fire."""
        arena = LoadedArena(name="manual", every={0: [Currency(9.0)], 2: [Currency(1.0)]})
        assert rewards_for_wave(arena, 4) == [Currency(1.0)]

    def test_no_rewards(self, arena):
        """Waves without rewards should give nothing."""
        assert rewards_for_wave(arena, 1) == []
        assert rewards_for_wave(arena, 0) == []


class TestRewardManager:
    """Tests for reward bookkeeping and payout."""

    def test_add_and_list(self, manager):
        """Queued rewards should be listed per recipient."""
        manager.add_rewards("steve", [Currency(1.0), Permission("a")])
        assert manager.rewards_for("steve") == [Currency(1.0), Permission("a")]
        assert manager.rewards_for("alex") == []

    def test_add_none(self, manager):
        """Adding None should raise."""
        with pytest.raises(ValueError, match="cannot be None"):
            manager.add_reward("steve", None)

    def test_grant(self, manager, recipient, economy):
        """Granting should pay out every queued reward."""
        manager.add_rewards("steve", [Currency(5.0), Item.parse("arrow:8")])
        assert manager.grant_rewards(recipient)
        assert economy.balances["steve"] == 5.0
        assert recipient.inventory.count("arrow") == 8
        assert manager.has_been_rewarded("steve")

    def test_grant_once(self, manager, recipient, economy):
        """A recipient should only be paid once."""
        manager.add_reward("steve", Currency(5.0))
        manager.grant_rewards(recipient)
        assert not manager.grant_rewards(recipient)
        assert economy.balances["steve"] == 5.0

    def test_grant_nothing_queued(self, manager, recipient):
        """Granting with an empty queue should report False."""
        assert not manager.grant_rewards(recipient)
        assert not manager.has_been_rewarded("steve")

    def test_partial_failure(self, recipient, economy):
        """A failed reward should not stop the others."""
        manager = RewardManager()
        manager.add_rewards("steve", [Currency(5.0), Item.parse("arrow")])
        assert not manager.grant_rewards(recipient)
        assert recipient.inventory.count("arrow") == 1
        assert manager.has_been_rewarded("steve")

    def test_reset(self, manager, recipient):
        """Reset should clear queues and payout history."""
        manager.add_reward("steve", Item.parse("arrow"))
        manager.grant_rewards(recipient)
        manager.reset()
        assert manager.rewards_for("steve") == []
        assert not manager.has_been_rewarded("steve")
