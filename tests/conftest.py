"""Core test fixtures for reward descriptor tests."""

from dataclasses import dataclass, field

import pytest

from src.grantable import ItemStack, PotionEffect, Registry, Services
from src.grantable.catalog import EffectType, MATERIALS_BY_NAME


class FakeInventory:
    """Slot-based inventory; each added stack takes one empty slot."""

    def __init__(self, size: int = 9) -> None:
        self.slots: list[ItemStack | None] = [None] * size

    def add_item(self, *stacks: ItemStack) -> list[ItemStack]:
        leftover = []
        for stack in stacks:
            try:
                index = self.slots.index(None)
            except ValueError:
                leftover.append(stack)
                continue
            self.slots[index] = stack.copy()
        return leftover

    def get_contents(self) -> list[ItemStack | None]:
        return list(self.slots)

    def set_contents(self, contents: list[ItemStack | None]) -> None:
        self.slots = list(contents)

    def count(self, name: str) -> int:
        material = MATERIALS_BY_NAME[name.upper()]
        return sum(s.amount for s in self.slots if s is not None and s.material == material)


@dataclass
class FakeRecipient:
    """Recipient with an in-memory inventory and effect list."""

    name: str = "steve"
    inventory: FakeInventory = field(default_factory=FakeInventory)
    effects: list[PotionEffect] = field(default_factory=list)
    accept_effects: bool = True

    def get_active_effects(self) -> list[PotionEffect]:
        return list(self.effects)

    def add_effect(self, effect: PotionEffect) -> bool:
        if not self.accept_effects:
            return False
        self.effects = [e for e in self.effects if e.type != effect.type]
        self.effects.append(effect)
        return True

    def remove_effect(self, effect_type: EffectType) -> None:
        self.effects = [e for e in self.effects if e.type != effect_type]


class FakeEconomy:
    """Economy backed by a dict of balances."""

    def __init__(self, balances: dict[str, float] | None = None) -> None:
        self.balances = dict(balances or {})

    def deposit(self, account: str, amount: float) -> bool:
        self.balances[account] = self.balances.get(account, 0.0) + amount
        return True

    def withdraw(self, account: str, amount: float) -> bool:
        if self.balances.get(account, 0.0) < amount:
            return False
        self.balances[account] -= amount
        return True

    def has(self, account: str, amount: float) -> bool:
        return self.balances.get(account, 0.0) >= amount


class FakePermissions:
    """Permission backend backed by a set per recipient name."""

    def __init__(self) -> None:
        self.nodes: dict[str, set[str]] = {}

    def add(self, recipient, permission: str) -> bool:
        self.nodes.setdefault(recipient.name, set()).add(permission)
        return True

    def remove(self, recipient, permission: str) -> bool:
        nodes = self.nodes.get(recipient.name, set())
        if permission not in nodes:
            return False
        nodes.remove(permission)
        return True

    def has(self, recipient, permission: str) -> bool:
        return permission in self.nodes.get(recipient.name, set())


@pytest.fixture
def recipient() -> FakeRecipient:
    """Recipient with an empty nine-slot inventory."""
    return FakeRecipient()


@pytest.fixture
def economy() -> FakeEconomy:
    return FakeEconomy()


@pytest.fixture
def permissions() -> FakePermissions:
    return FakePermissions()


@pytest.fixture
def services(economy: FakeEconomy, permissions: FakePermissions) -> Services:
    """Services wired to the fake economy and permission backends."""
    return Services(economy=economy, permissions=permissions)


@pytest.fixture
def registry() -> Registry:
    """Fresh registry so custom kinds do not leak between tests."""
    return Registry()
