"""Tests for the effect grantable."""

import pytest

from src.grantable import Effect
from src.grantable.catalog import EFFECTS_BY_NAME
from src.grantable.effect import (
    INFINITE_DURATION,
    format_duration,
    parse_amplifier,
    parse_duration,
)
from src.grantable.errors import EmptyInputError, InvalidValueError

SPEED = EFFECTS_BY_NAME["SPEED"]
POISON = EFFECTS_BY_NAME["POISON"]


class TestParseAmplifier:
    """Tests for amplifier parsing."""

    @pytest.mark.parametrize("text,expected", [("I", 0), ("III", 2), ("v", 4), ("3", 2), ("1", 0), ("0", 0)])
    def test_values(self, text, expected):
        """Test roman and numeric amplifiers are 1-indexed."""
        assert parse_amplifier(text) == expected

    def test_invalid(self):
        """Test garbage amplifiers."""
        with pytest.raises(InvalidValueError):
            parse_amplifier("VI")
        with pytest.raises(InvalidValueError):
            parse_amplifier("-1")
        with pytest.raises(EmptyInputError):
            parse_amplifier("")


class TestParseDuration:
    """Tests for duration parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [("30", 600), ("30s", 600), ("2m30s", 3000), ("1h", 72000), ("1h1m1s", 73220)],
    )
    def test_values(self, text, expected):
        """Test durations are converted to ticks."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["0", "0m", "0s0m"])
    def test_zero(self, text):
        """Test zero durations are rejected."""
        with pytest.raises(InvalidValueError):
            parse_duration(text)

    @pytest.mark.parametrize("text", ["2x", "m30", "1.5s", "-5"])
    def test_invalid(self, text):
        """Test malformed durations."""
        with pytest.raises(InvalidValueError):
            parse_duration(text)

    def test_format(self):
        """Test ticks are formatted compactly."""
        assert format_duration(1800) == "1m30s"
        assert format_duration(72000) == "1h"
        assert format_duration(0) == "0s"


class TestEffectParse:
    """Tests for parsing effect descriptors."""

    def test_name_only(self):
        """Test an effect with defaults."""
        effect = Effect.parse("@speed")
        assert effect.effect_type == SPEED
        assert effect.amplifier == 0
        assert effect.is_infinite

    def test_keyword_forms(self):
        """Test both spellings of the keyword."""
        assert Effect.parse("eff:speed") == Effect.parse("effect:speed")

    def test_amplifier_only(self):
        """Test a second part that looks like an amplifier."""
        effect = Effect.parse("eff:speed II")
        assert effect.amplifier == 1
        assert effect.is_infinite

    def test_duration_only(self):
        """Test a second part that looks like a duration."""
        effect = Effect.parse("@speed 30s")
        assert effect.amplifier == 0
        assert effect.duration == 600

    def test_long_number_is_duration(self):
        """Test a number of three or more digits is read as seconds."""
        effect = Effect.parse("@speed 120")
        assert effect.amplifier == 0
        assert effect.duration == 2400

    def test_full_form(self):
        """Test name, amplifier and duration."""
        effect = Effect.parse("@poison 3 1m30s")
        assert effect == Effect(POISON, amplifier=2, duration=1800)

    def test_numeric_id(self):
        """Test effects may be named by id."""
        assert Effect.parse("@1").effect_type == SPEED

    def test_unknown_effect(self):
        """Test an unknown effect name."""
        with pytest.raises(InvalidValueError, match="not a valid effect"):
            Effect.parse("@flying")

    def test_too_many_parts(self):
        """Test more than three parts."""
        with pytest.raises(InvalidValueError):
            Effect.parse("@speed 2 30s extra")

    def test_zero_duration(self):
        """Test a zero duration in the full form."""
        with pytest.raises(InvalidValueError):
            Effect.parse("@speed 2 0")

    def test_empty(self):
        """Test empty input."""
        with pytest.raises(EmptyInputError):
            Effect.parse("")


class TestEffectFormat:
    """Tests for effect output."""

    def test_non_positive_duration_is_infinite(self):
        """Test constructing with a zero duration."""
        assert Effect(SPEED, duration=0).duration == INFINITE_DURATION
        assert Effect(SPEED, duration=-5).is_infinite

    def test_to_string(self):
        """Test the canonical descriptors."""
        assert Effect(SPEED).to_string() == "eff:speed"
        assert Effect(SPEED, amplifier=1).to_string() == "eff:speed 2"
        assert Effect(SPEED, amplifier=1, duration=1800).to_string() == "eff:speed 2 1m30s"

    def test_canonical_parses_back(self):
        """Test the canonical form reads back to an equal effect."""
        effect = Effect(POISON, amplifier=3, duration=600)
        assert Effect.parse(effect.to_string()) == effect

    @pytest.mark.parametrize("ticks,expected", [(1, 20), (10, 20), (30, 40), (1799, 1800)])
    def test_partial_seconds_round_up(self, ticks, expected):
        """Test durations that are not whole seconds are rounded up."""
        assert Effect(SPEED, duration=ticks).duration == expected

    @pytest.mark.parametrize("ticks", [10, 30, 1801])
    def test_partial_seconds_parse_back(self, ticks):
        """Test tick durations survive the canonical form."""
        effect = Effect(SPEED, amplifier=1, duration=ticks)
        assert Effect.parse(effect.to_string()) == effect


class TestEffectExecution:
    """Tests for grant, take and has on a recipient."""

    def test_grant(self, recipient):
        """Test granting applies the effect."""
        effect = Effect(SPEED, amplifier=1, duration=600)
        assert effect.grant(recipient)
        applied = recipient.effects[0]
        assert applied.type == SPEED
        assert applied.amplifier == 1
        assert applied.duration == 600
        assert effect.has(recipient)

    def test_grant_refused(self, recipient):
        """Test a recipient that refuses the effect."""
        recipient.accept_effects = False
        assert not Effect(SPEED).grant(recipient)

    def test_take(self, recipient):
        """Test taking removes the effect only if present."""
        effect = Effect(SPEED)
        assert not effect.take(recipient)
        effect.grant(recipient)
        assert effect.take(recipient)
        assert not effect.has(recipient)
