"""Grantable wrapping a native item stack.

Used when a reward comes from an existing stack (for example one copied
out of a chest) rather than from a descriptor, so that display names and
other native details survive.
"""

from src.grantable.capabilities import ItemStack, Recipient, Services
from src.grantable.item import count_in_inventory, remove_from_inventory, serialize_stack


class StackItem:
    """A grantable native ItemStack."""

    def __init__(self, stack: ItemStack) -> None:
        self.stack = stack.copy()

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        leftover = recipient.inventory.add_item(self.stack.copy())
        return not leftover

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        return remove_from_inventory(recipient.inventory, self.stack.material, self.stack.amount)

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        return count_in_inventory(recipient.inventory, self.stack.material) >= self.stack.amount

    def to_string(self) -> str:
        return serialize_stack(self.stack) or ""

    def __str__(self) -> str:
        amount = "" if self.stack.amount == 1 else f" x{self.stack.amount}"
        if self.stack.display_name:
            return self.stack.display_name + amount
        return self.stack.material.name.lower() + amount

    def __repr__(self) -> str:
        return f"StackItem({self.stack!r})"
