"""Bulk item helpers for kit and chest configuration.

Unlike the core parser, these helpers log bad entries and carry on,
which is what kit and chest loading wants.
"""

import logging

from src.grantable import GrantableError, GrantableParser, ItemStack

logger = logging.getLogger(__name__)


def parse_item_stack(text: str | None) -> ItemStack | None:
    """Parse the first item of a descriptor into a native stack.

    Returns:
        The stack, or None if text is empty or invalid (logged).
    """
    if not text:
        return None
    try:
        return GrantableParser(text).next_item().to_stack()
    except GrantableError as e:
        logger.error("Invalid item '%s': %s", text, e)
        return None


def parse_item_stacks(text: str | list[str] | None) -> list[ItemStack]:
    """Parse every token of a descriptor into native stacks.

    Invalid items are logged and skipped. A malformed descriptor (for
    example an unclosed group) yields no stacks.

    Args:
        text: Descriptor string, or a list of descriptor lines.
    """
    if isinstance(text, list):
        text = ", ".join(text)
    if not text:
        return []

    try:
        parser = GrantableParser(text)
    except GrantableError as e:
        logger.error("Invalid item list '%s': %s", text, e)
        return []

    stacks: list[ItemStack] = []
    while parser.has_next():
        try:
            stacks.append(parser.next_item().to_stack())
        except GrantableError as e:
            logger.error("Skipping item: %s", e)
    return stacks
