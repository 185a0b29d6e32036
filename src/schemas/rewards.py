"""Reward file schemas for YAML/JSON import.

A reward file lists arenas, each with wave rewards and optional
completion rewards and class kits. Every reward value is a descriptor
string such as ``"iron_sword, $5"``; parsing happens in the reward loader.
"""

from pydantic import BaseModel, Field, field_validator


class WaveRewards(BaseModel):
    """Rewards tied to wave numbers."""

    every: dict[int, str] = Field(
        default_factory=dict,
        description="Wave interval to descriptor; fires on every multiple of the interval",
    )
    after: dict[int, str] = Field(
        default_factory=dict,
        description="Wave number to descriptor; fires once when the wave is reached",
    )

    @field_validator("every", "after")
    @classmethod
    def waves_positive(cls, value: dict[int, str]) -> dict[int, str]:
        for wave in value:
            if wave < 1:
                raise ValueError(f"Wave numbers must be positive, got {wave}")
        return value


class ArenaRewards(BaseModel):
    """Reward configuration of one arena."""

    name: str = Field(..., description="Arena name")
    waves: WaveRewards = Field(default_factory=WaveRewards)
    completion: str | None = Field(
        default=None,
        description="Descriptor granted when the final wave is cleared",
    )
    class_items: dict[str, str] = Field(
        default_factory=dict,
        description="Class name to item descriptor for the class kit",
    )


class RewardFile(BaseModel):
    """Complete reward file."""

    arenas: list[ArenaRewards] = Field(default_factory=list)
