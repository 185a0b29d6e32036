"""Timed status effect grantable.

Descriptor body (after ``@`` or ``eff:``/``effect:``) is one to three
space-separated parts::

    speed               amplifier I, lasts forever
    speed II            amplifier II, lasts forever
    speed 30s           amplifier I, lasts 30 seconds
    speed 3 1m30s       amplifier III, lasts 90 seconds

Amplifiers are written 1-indexed (``I``-``V`` or a number) and stored
0-indexed. Durations are stored in ticks.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from src.grantable.capabilities import PotionEffect, Recipient, Services
from src.grantable.catalog import EffectType, find_effect_type
from src.grantable.errors import EmptyInputError, InvalidValueError
from src.grantable.info import GrantableInfo, compile_pattern, strip_prefix


TICKS_PER_SECOND = 20

# Sentinel for "lasts until removed"
INFINITE_DURATION = 2**31 - 1

ROMAN_AMPLIFIERS = {"I": 0, "II": 1, "III": 2, "IV": 3, "V": 4}

# A second part that looks like this is an amplifier, anything else a duration
AMPLIFIER_LIKE = re.compile(r"\d{1,2}|(?:I|II|III|IV|V)", re.IGNORECASE)

DURATION_UNITS = {"s": 1, "m": 60, "h": 3600}
DURATION_PATTERN = re.compile(r"(?:\d+[smh])+", re.IGNORECASE)
DURATION_PART = re.compile(r"(\d+)([smh])", re.IGNORECASE)


def parse_amplifier(text: str) -> int:
    """Parse a 1-indexed amplifier into a 0-indexed level.

    Examples:
        >>> parse_amplifier("III")
        2
        >>> parse_amplifier("3")
        2
        >>> parse_amplifier("0")
        0

    Raises:
        EmptyInputError: If text is empty.
        InvalidValueError: If text is neither I-V nor a non-negative integer.
    """
    if not text or not text.strip():
        raise EmptyInputError("Amplifier cannot be empty")

    text = text.strip()
    roman = ROMAN_AMPLIFIERS.get(text.upper())
    if roman is not None:
        return roman
    if text.isascii() and text.isdigit():
        return max(0, int(text) - 1)
    raise InvalidValueError(f"'{text}' is not a valid effect amplifier", token=text)


def parse_duration(text: str) -> int:
    """Parse a duration into ticks.

    A bare positive integer is seconds. Otherwise the text is a run of
    number-unit pairs with units s, m and h.

    Examples:
        >>> parse_duration("30")
        600
        >>> parse_duration("2m30s")
        3000

    Raises:
        EmptyInputError: If text is empty.
        InvalidValueError: If the syntax is wrong or the total is zero.
    """
    if not text or not text.strip():
        raise EmptyInputError("Duration cannot be empty")

    text = text.strip()
    if text.isascii() and text.isdigit():
        seconds = int(text)
    elif DURATION_PATTERN.fullmatch(text):
        seconds = sum(
            int(amount) * DURATION_UNITS[unit.lower()]
            for amount, unit in DURATION_PART.findall(text)
        )
    else:
        raise InvalidValueError(f"'{text}' is not a valid effect duration", token=text)

    if seconds <= 0:
        raise InvalidValueError(f"Effect duration must be positive: '{text}'", token=text)
    return seconds * TICKS_PER_SECOND


def format_duration(ticks: int) -> str:
    """Format ticks as a compact duration string, e.g. "1m30s"."""
    seconds = ticks // TICKS_PER_SECOND
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or not parts:
        parts.append(f"{seconds}s")
    return "".join(parts)


@dataclass(frozen=True)
class Effect:
    """A timed status effect.

    Attributes:
        effect_type: The effect to apply.
        amplifier: 0-indexed potency level.
        duration: Duration in ticks, rounded up to whole seconds, or
            INFINITE_DURATION.
    """

    info: ClassVar[GrantableInfo] = GrantableInfo(prefix="eff(ect)", symbol="@")

    effect_type: EffectType
    amplifier: int = 0
    duration: int = INFINITE_DURATION

    def __post_init__(self) -> None:
        if self.duration <= 0:
            object.__setattr__(self, "duration", INFINITE_DURATION)
        elif self.duration != INFINITE_DURATION and self.duration % TICKS_PER_SECOND:
            # Descriptors only express whole seconds; round up
            seconds = -(-self.duration // TICKS_PER_SECOND)
            object.__setattr__(self, "duration", seconds * TICKS_PER_SECOND)

    @property
    def is_infinite(self) -> bool:
        return self.duration == INFINITE_DURATION

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        effect = PotionEffect(type=self.effect_type, duration=self.duration, amplifier=self.amplifier)
        return recipient.add_effect(effect)

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        if not self.has(recipient, services):
            return False
        recipient.remove_effect(self.effect_type)
        return True

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        return any(effect.type == self.effect_type for effect in recipient.get_active_effects())

    def to_string(self) -> str:
        name = self.effect_type.name.lower()
        if self.is_infinite:
            if self.amplifier == 0:
                return f"eff:{name}"
            return f"eff:{name} {self.amplifier + 1}"
        return f"eff:{name} {self.amplifier + 1} {format_duration(self.duration)}"

    def __str__(self) -> str:
        return f"Effect[{self.to_string()}]"

    @classmethod
    def parse(cls, text: str) -> "Effect":
        """Parse an effect body, with or without its prefix.

        Raises:
            EmptyInputError: If there is no effect key.
            InvalidValueError: On unknown effects, bad amplifiers or
                durations, or more than three parts.
        """
        if text is None:
            raise EmptyInputError("Effect cannot be None")

        return cls.from_body(strip_prefix(_PATTERN, text.strip()))

    @classmethod
    def from_body(cls, body: str) -> "Effect":
        """Parse an effect body that has no prefix."""
        body = body.strip()
        parts = body.split()
        if not parts:
            raise EmptyInputError("Effect cannot be empty", token=body)
        if len(parts) > 3:
            raise InvalidValueError(f"'{body}' is not valid effect syntax", token=body)

        effect_type = find_effect_type(parts[0])
        if effect_type is None:
            raise InvalidValueError(f"'{parts[0]}' is not a valid effect", token=parts[0])

        amplifier = 0
        duration = INFINITE_DURATION
        if len(parts) == 3:
            amplifier = parse_amplifier(parts[1])
            duration = parse_duration(parts[2])
        elif len(parts) == 2:
            if AMPLIFIER_LIKE.fullmatch(parts[1]):
                amplifier = parse_amplifier(parts[1])
            else:
                duration = parse_duration(parts[1])

        return cls(effect_type=effect_type, amplifier=amplifier, duration=duration)


_PATTERN = compile_pattern(Effect.info)
