"""Tests for grantables wrapping native stacks."""

from src.grantable import ItemStack, StackItem
from src.grantable.catalog import MATERIALS_BY_NAME, WOOL

ARROW = MATERIALS_BY_NAME["ARROW"]
IRON_SWORD = MATERIALS_BY_NAME["IRON_SWORD"]


class TestStackItem:
    """Tests for StackItem."""

    def test_copies_stack(self):
        """Test later changes to the source stack are not seen."""
        stack = ItemStack(ARROW, amount=4)
        item = StackItem(stack)
        stack.amount = 60
        assert item.stack.amount == 4

    def test_to_string(self):
        """Test the canonical descriptor of the stack."""
        assert StackItem(ItemStack(WOOL, amount=2, data=14)).to_string() == "wool:1:2"
        assert StackItem(ItemStack(MATERIALS_BY_NAME["AIR"])).to_string() == ""

    def test_str_uses_display_name(self):
        """Test display names are shown when present."""
        assert str(StackItem(ItemStack(IRON_SWORD, display_name="Excalibur"))) == "Excalibur"
        assert str(StackItem(ItemStack(ARROW, amount=3))) == "arrow x3"

    def test_grant_keeps_display_name(self, recipient):
        """Test the granted stack carries native details."""
        item = StackItem(ItemStack(IRON_SWORD, display_name="Excalibur"))
        assert item.grant(recipient)
        assert recipient.inventory.slots[0].display_name == "Excalibur"

    def test_take_and_has(self, recipient):
        """Test take and has match on material and amount."""
        item = StackItem(ItemStack(ARROW, amount=4))
        assert not item.has(recipient)
        item.grant(recipient)
        item.grant(recipient)
        assert item.has(recipient)
        assert item.take(recipient)
        assert recipient.inventory.count("arrow") == 4
