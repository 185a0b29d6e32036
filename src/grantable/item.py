"""Item grantable, the default kind.

Any token that carries no known prefix is parsed as an item::

    item         ::=  id_or_name opt_data_amount opt_enchantments
    id_or_name   ::=  ITEM_ID | ITEM_NAME
    opt_data_amount ::=  EMPTY | ":" amount | ":" data ":" amount
    data         ::=  NUMBER | COLOR_NAME
    opt_enchantments ::=  EMPTY | " " ench (";" ench)*
    ench         ::=  (ENCH_ID | ENCH_NAME) ":" NUMBER

Examples: ``iron_sword``, ``arrow:32``, ``wool:red:5``,
``diamond_sword 16:2;34:3``.
"""

import re
from dataclasses import dataclass, field

from src.grantable.capabilities import Inventory, ItemStack, Recipient, Services
from src.grantable.catalog import (
    AIR,
    ENCHANTMENTS_BY_NAME,
    POTION,
    WOOL,
    Material,
    find_dye_color,
    find_enchantment,
    find_material,
)
from src.grantable.errors import EmptyInputError, InvalidValueError


NUMBER = re.compile(r"[0-9]+")
SIGNED_NUMBER = re.compile(r"[+-]?[0-9]+")

MAX_DATA = 15
# Potions keep their variant in the full durability value
MAX_POTION_DATA = 32767


def _invert_wool(material: Material, data: int) -> int:
    """Wool stores its colour byte inverted relative to dye data."""
    if material == WOOL:
        return MAX_DATA - data
    return data


def count_in_inventory(inventory: Inventory, material: Material) -> int:
    """Count how many items of a material the inventory holds."""
    return sum(
        stack.amount
        for stack in inventory.get_contents()
        if stack is not None and stack.material == material
    )


def remove_from_inventory(inventory: Inventory, material: Material, amount: int) -> bool:
    """Remove an amount of a material across inventory slots.

    Nothing is changed unless the whole amount is available.

    Returns:
        True if the full amount was removed.
    """
    contents = [stack.copy() if stack is not None else None for stack in inventory.get_contents()]

    remaining = amount
    for i, stack in enumerate(contents):
        if stack is None or stack.material != material:
            continue

        if stack.amount > remaining:
            stack.amount -= remaining
            remaining = 0
        else:
            contents[i] = None
            remaining -= stack.amount

        if remaining == 0:
            inventory.set_contents(contents)
            return True
    return False


@dataclass
class Item:
    """An inventory item described by plain values.

    Attributes:
        material: Item type.
        amount: Stack size, at least 1.
        data: Data value in descriptor form (dye data for wool).
        enchantments: Enchantment name to level.
    """

    material: Material
    amount: int = 1
    data: int = 0
    enchantments: dict[str, int] = field(default_factory=dict)

    def add_enchantment(self, name: str, level: int) -> None:
        self.enchantments[name] = level

    def to_stack(self) -> ItemStack:
        """Convert this item to its native stack representation."""
        return ItemStack(
            material=self.material,
            amount=self.amount,
            data=_invert_wool(self.material, self.data),
            enchantments=dict(self.enchantments),
        )

    @classmethod
    def from_stack(cls, stack: ItemStack) -> "Item":
        """Convert a native stack into an Item.

        Display names are dropped.
        """
        return cls(
            material=stack.material,
            amount=stack.amount,
            data=_invert_wool(stack.material, stack.data),
            enchantments=dict(stack.enchantments),
        )

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        leftover = recipient.inventory.add_item(self.to_stack())
        return not leftover

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        return remove_from_inventory(recipient.inventory, self.material, self.amount)

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        return count_in_inventory(recipient.inventory, self.material) >= self.amount

    def to_string(self) -> str:
        """Return the canonical descriptor.

        Examples:
            >>> Item(material=Material(35, "WOOL"), amount=5, data=1).to_string()
            'wool:1:5'
        """
        result = self.material.name.lower()
        if self.data != 0:
            result += f":{self.data}"
        if self.amount > 1 or self.data != 0:
            result += f":{self.amount}"

        enchants = _format_enchantments(self.enchantments)
        if enchants:
            result += f" {enchants}"
        return result

    def __str__(self) -> str:
        name = self.material.name.lower()
        return name if self.amount == 1 else f"{name} x{self.amount}"

    @classmethod
    def parse(cls, text: str) -> "Item":
        """Parse an item descriptor.

        Args:
            text: Item descriptor, e.g. "wool:red:5 durability:3".

        Returns:
            The parsed Item.

        Raises:
            EmptyInputError: If text is empty.
            InvalidValueError: On unknown items, colours or enchantments, or
                malformed data, amounts or enchantment entries.
        """
        if text is None or not text.strip():
            raise EmptyInputError("Item cannot be empty", token=text)

        head, _, tail = text.strip().partition(" ")
        item = _parse_base(head)
        for name, level in _parse_enchantments(tail.strip()).items():
            item.add_enchantment(name, level)
        return item


def _parse_base(text: str) -> Item:
    parts = text.split(":")
    if len(parts) > 3:
        raise InvalidValueError(f"'{text}' is not valid item syntax", token=text)

    material = find_material(parts[0])
    if material is None:
        if NUMBER.fullmatch(parts[0]):
            raise InvalidValueError(f"'{parts[0]}' is not a valid item ID", token=parts[0])
        raise InvalidValueError(f"'{parts[0]}' is not a valid item name", token=parts[0])

    data = 0
    amount = 1
    if len(parts) == 3:
        data = _parse_data(material, parts[1])
        amount = _parse_amount(parts[2])
    elif len(parts) == 2:
        amount = _parse_amount(parts[1])

    return Item(material=material, amount=amount, data=data)


def _parse_data(material: Material, text: str) -> int:
    if NUMBER.fullmatch(text):
        data = int(text)
        limit = MAX_POTION_DATA if material == POTION else MAX_DATA
        if data > limit:
            raise InvalidValueError(f"'{text}' is not a valid data value", token=text)
        return data

    color = find_dye_color(text)
    if color is None:
        raise InvalidValueError(f"'{text}' is not a valid color", token=text)
    return color.value


def _parse_amount(text: str) -> int:
    if not NUMBER.fullmatch(text) or int(text) < 1:
        raise InvalidValueError(f"'{text}' is not a valid amount", token=text)
    return int(text)


def _parse_enchantments(text: str) -> dict[str, int]:
    if not text:
        return {}

    result: dict[str, int] = {}
    for entry in text.split(";"):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split(":")
        if len(parts) != 2:
            raise InvalidValueError(f"'{entry}' is not valid enchantment syntax", token=entry)

        enchantment = find_enchantment(parts[0])
        if enchantment is None:
            raise InvalidValueError(f"'{parts[0]}' is not a valid enchantment ID", token=parts[0])

        if not SIGNED_NUMBER.fullmatch(parts[1]):
            raise InvalidValueError(f"'{parts[1]}' is not a valid enchantment level", token=parts[1])
        result[enchantment.name] = int(parts[1])
    return result


def _format_enchantments(enchantments: dict[str, int]) -> str:
    pairs = sorted(
        (ENCHANTMENTS_BY_NAME[name].id, level)
        for name, level in enchantments.items()
        if name in ENCHANTMENTS_BY_NAME
    )
    return ";".join(f"{ench_id}:{level}" for ench_id, level in pairs)


def serialize_stack(stack: ItemStack) -> str | None:
    """Return the canonical descriptor for a native stack.

    Returns:
        The descriptor, or None for an empty (air) stack.
    """
    if stack.material == AIR:
        return None
    return Item.from_stack(stack).to_string()


def serialize_stacks(stacks: list[ItemStack | None]) -> str:
    """Join the descriptors of several stacks, skipping empty ones.

    Examples:
        >>> serialize_stacks([])
        ''
    """
    descriptors = (serialize_stack(stack) for stack in stacks if stack is not None)
    return ", ".join(d for d in descriptors if d)
