"""Reward loader service for importing reward tables from YAML/JSON files.

Descriptors that fail to parse are logged and skipped, unless strict
loading is requested, in which case the first failure aborts the load.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.grantable import Grantable, GrantableError, Item, Registry, default_registry, tokenize
from src.schemas.rewards import ArenaRewards, RewardFile

logger = logging.getLogger(__name__)


class RewardLoadError(Exception):
    """Error during reward loading."""

    pass


@dataclass
class LoadedArena:
    """Parsed rewards of one arena.

    Attributes:
        name: Arena name.
        every: Wave interval to rewards.
        after: Wave number to rewards.
        completion: Rewards for clearing the arena.
        class_items: Class name to kit items.
    """

    name: str
    every: dict[int, list[Grantable]] = field(default_factory=dict)
    after: dict[int, list[Grantable]] = field(default_factory=dict)
    completion: list[Grantable] = field(default_factory=list)
    class_items: dict[str, list[Item]] = field(default_factory=dict)


@dataclass
class LoadedRewards:
    """Result of loading a reward file.

    Attributes:
        arenas: Arena name to parsed rewards.
        errors: One message per skipped descriptor or token.
    """

    arenas: dict[str, LoadedArena] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_descriptor(
    text: str,
    context: str,
    errors: list[str],
    strict: bool = False,
    registry: Registry | None = None,
) -> list[Grantable]:
    """Parse a descriptor, collecting failures instead of raising.

    Args:
        text: Descriptor string.
        context: Where the descriptor came from, used in messages.
        errors: List that receives one message per failure.
        strict: Raise on the first failure instead of skipping.
        registry: Registry to dispatch with.

    Returns:
        Grantables for every token that parsed.

    Raises:
        RewardLoadError: On the first failure when strict is set.
    """
    registry = registry or default_registry

    try:
        tokens = tokenize(text)
    except GrantableError as e:
        _record(f"{context}: {e}", errors, strict, e)
        return []

    result: list[Grantable] = []
    for token in tokens:
        try:
            result.append(registry.dispatch(token))
        except GrantableError as e:
            _record(f"{context}: {e}", errors, strict, e)
    return result


def _record(message: str, errors: list[str], strict: bool, cause: Exception) -> None:
    if strict:
        raise RewardLoadError(message) from cause
    logger.warning("Skipping reward: %s", message)
    errors.append(message)


def _parse_items(text: str, context: str, errors: list[str], strict: bool) -> list[Item]:
    items: list[Item] = []
    for token in _safe_tokens(text, context, errors, strict):
        try:
            items.append(Item.parse(token))
        except GrantableError as e:
            _record(f"{context}: {e}", errors, strict, e)
    return items


def _safe_tokens(text: str, context: str, errors: list[str], strict: bool) -> list[str]:
    try:
        return tokenize(text)
    except GrantableError as e:
        _record(f"{context}: {e}", errors, strict, e)
        return []


def load_arena(
    template: ArenaRewards,
    errors: list[str],
    strict: bool = False,
    registry: Registry | None = None,
) -> LoadedArena:
    """Parse every descriptor of one arena template."""
    arena = LoadedArena(name=template.name)

    for wave, text in sorted(template.waves.every.items()):
        arena.every[wave] = parse_descriptor(
            text, f"{template.name} every {wave}", errors, strict, registry
        )
    for wave, text in sorted(template.waves.after.items()):
        arena.after[wave] = parse_descriptor(
            text, f"{template.name} after {wave}", errors, strict, registry
        )
    if template.completion:
        arena.completion = parse_descriptor(
            template.completion, f"{template.name} completion", errors, strict, registry
        )
    for class_name, text in template.class_items.items():
        arena.class_items[class_name] = _parse_items(
            text, f"{template.name} class {class_name}", errors, strict
        )

    logger.debug(
        "Loaded arena %s: %d every, %d after, %d classes",
        template.name,
        len(arena.every),
        len(arena.after),
        len(arena.class_items),
    )
    return arena


def load_rewards(
    data: dict[str, Any],
    strict: bool = False,
    registry: Registry | None = None,
) -> LoadedRewards:
    """Validate raw reward data and parse every descriptor.

    Raises:
        RewardLoadError: If the data does not match the schema, or on the
            first bad descriptor when strict is set.
    """
    try:
        template = RewardFile.model_validate(data)
    except ValidationError as e:
        raise RewardLoadError(f"Invalid reward file: {e}") from e

    result = LoadedRewards()
    for arena_template in template.arenas:
        if arena_template.name in result.arenas:
            message = f"Duplicate arena '{arena_template.name}'"
            if strict:
                raise RewardLoadError(message)
            logger.warning("Skipping arena: %s", message)
            result.errors.append(message)
            continue
        result.arenas[arena_template.name] = load_arena(arena_template, result.errors, strict, registry)
    return result


def load_reward_file(
    file_path: Path,
    strict: bool = False,
    registry: Registry | None = None,
) -> LoadedRewards:
    """Load reward tables from a YAML or JSON file.

    Args:
        file_path: Path to a .yaml, .yml or .json file.
        strict: Abort on the first bad descriptor.
        registry: Registry to dispatch with.

    Returns:
        LoadedRewards with parsed arenas and skipped-entry messages.

    Raises:
        RewardLoadError: If the file cannot be parsed or is invalid.
        FileNotFoundError: If the file does not exist.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Reward file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise RewardLoadError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")

    try:
        with open(file_path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        raise RewardLoadError(f"Failed to parse {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RewardLoadError(f"Reward file must contain a mapping: {file_path}")

    logger.info("Loading rewards from %s", file_path)
    result = load_rewards(data, strict=strict, registry=registry)
    if result.errors:
        logger.warning("%d reward entries skipped in %s", len(result.errors), file_path)
    return result
