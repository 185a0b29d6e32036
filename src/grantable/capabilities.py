"""Collaborator protocols used when executing grantables.

Parsing never touches a recipient. Granting, taking and checking do, and
they only go through the narrow protocols below, so the host game (or a
test) supplies the real behaviour. Economy and permission backends are
passed in explicitly through Services instead of living in globals.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from src.grantable.catalog import EffectType, Material


@dataclass
class ItemStack:
    """Native inventory representation of an item.

    Attributes:
        material: Item type.
        amount: Stack size.
        data: Raw data byte as stored by the game (wool colours are
            inverted relative to the descriptor grammar).
        enchantments: Enchantment name to level.
        display_name: Custom display name, if any.
    """

    material: Material
    amount: int = 1
    data: int = 0
    enchantments: dict[str, int] = field(default_factory=dict)
    display_name: str | None = None

    def copy(self) -> "ItemStack":
        """Return an independent copy of this stack."""
        return ItemStack(
            material=self.material,
            amount=self.amount,
            data=self.data,
            enchantments=dict(self.enchantments),
            display_name=self.display_name,
        )


@dataclass(frozen=True)
class PotionEffect:
    """An active timed effect on a recipient.

    Attributes:
        type: The effect type.
        duration: Duration in ticks.
        amplifier: Zero-based potency level.
    """

    type: EffectType
    duration: int
    amplifier: int = 0


@runtime_checkable
class Inventory(Protocol):
    """A recipient's item storage."""

    def add_item(self, *stacks: ItemStack) -> list[ItemStack]:
        """Add stacks, returning whatever did not fit."""
        ...

    def get_contents(self) -> list[ItemStack | None]:
        """Return the slots, with None for empty slots."""
        ...

    def set_contents(self, contents: list[ItemStack | None]) -> None:
        """Replace all slots."""
        ...


@runtime_checkable
class Recipient(Protocol):
    """Someone who can receive grantables."""

    name: str

    @property
    def inventory(self) -> Inventory:
        """The recipient's inventory."""
        ...

    def get_active_effects(self) -> list[PotionEffect]:
        """Return the effects currently applied."""
        ...

    def add_effect(self, effect: PotionEffect) -> bool:
        """Apply an effect, returning whether it took."""
        ...

    def remove_effect(self, effect_type: EffectType) -> None:
        """Remove any active effect of the given type."""
        ...


@runtime_checkable
class Economy(Protocol):
    """Currency backend."""

    def deposit(self, account: str, amount: float) -> bool: ...

    def withdraw(self, account: str, amount: float) -> bool: ...

    def has(self, account: str, amount: float) -> bool: ...


@runtime_checkable
class PermissionBackend(Protocol):
    """Permission backend."""

    def add(self, recipient: Recipient, permission: str) -> bool: ...

    def remove(self, recipient: Recipient, permission: str) -> bool: ...

    def has(self, recipient: Recipient, permission: str) -> bool: ...


@dataclass(frozen=True)
class Services:
    """External backends handed to grant/take/has.

    Attributes:
        economy: Currency backend, or None if no economy is installed.
        permissions: Permission backend, or None if unavailable.
    """

    economy: Economy | None = None
    permissions: PermissionBackend | None = None


NO_SERVICES = Services()
