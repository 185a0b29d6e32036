"""Grantable reward descriptors.

Parses short reward strings from configuration text into typed values
that can be granted to, taken from, or checked against a recipient.

Usage:
    >>> from src.grantable import parse_all, register, GrantableInfo
    >>> rewards = parse_all("iron_sword, wool:red:5, $100, (#arena.vip, @speed II 30s)")
    >>> [r.to_string() for r in rewards][:2]
    ['iron_sword', 'wool:1:5']
"""

# Errors
from src.grantable.errors import (
    GrantableError,
    MalformedGroupError,
    InvalidValueError,
    UnknownKindError,
    EmptyInputError,
    RegistrationError,
)

# Metadata
from src.grantable.info import GrantableInfo, compile_pattern, validate_info

# Collaborators
from src.grantable.capabilities import (
    Economy,
    Inventory,
    ItemStack,
    PermissionBackend,
    PotionEffect,
    Recipient,
    Services,
)

# Kinds
from src.grantable.base import Grantable
from src.grantable.currency import Currency
from src.grantable.permission import Permission
from src.grantable.effect import (
    Effect,
    INFINITE_DURATION,
    TICKS_PER_SECOND,
    parse_amplifier,
    parse_duration,
)
from src.grantable.item import Item, serialize_stack, serialize_stacks
from src.grantable.stack_item import StackItem
from src.grantable.group import Group

# Parsing
from src.grantable.tokenizer import Tokenizer, tokenize
from src.grantable.registry import (
    GrantableParser,
    Registry,
    RegistryEntry,
    default_registry,
    parse,
    parse_all,
    register,
)

__all__ = [
    # Errors
    "GrantableError",
    "MalformedGroupError",
    "InvalidValueError",
    "UnknownKindError",
    "EmptyInputError",
    "RegistrationError",
    # Metadata
    "GrantableInfo",
    "compile_pattern",
    "validate_info",
    # Collaborators
    "Economy",
    "Inventory",
    "ItemStack",
    "PermissionBackend",
    "PotionEffect",
    "Recipient",
    "Services",
    # Kinds
    "Grantable",
    "Currency",
    "Permission",
    "Effect",
    "INFINITE_DURATION",
    "TICKS_PER_SECOND",
    "parse_amplifier",
    "parse_duration",
    "Item",
    "serialize_stack",
    "serialize_stacks",
    "StackItem",
    "Group",
    # Parsing
    "Tokenizer",
    "tokenize",
    "GrantableParser",
    "Registry",
    "RegistryEntry",
    "default_registry",
    "parse",
    "parse_all",
    "register",
]
