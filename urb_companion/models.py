"""Core domain models.

The dice engine, the resolvers, the session layer and storage all operate on
these types. Pydantic is used for validation and serialisation at every data
boundary: a race outside the closed set, or a negative life force or stat,
fails here rather than deep inside the engine.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

Race = Literal["SOLOZO", "BARAB", "TWILIGHTER", "OTHER"]

RACES: tuple[str, ...] = get_args(Race)

Sender = Literal["dm", "player", "system"]


def race_display_name(race: str) -> str:
    """Title-case a race for display, e.g. "Twilighter"."""
    return race.title()


class Character(BaseModel):
    """The player character. The engine only ever reads it."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    race: Race
    background: str = ""
    life_force: NonNegativeInt
    experience_modifier: int = 0
    skills: dict[str, NonNegativeInt] = Field(default_factory=dict)
    characteristics: dict[str, NonNegativeInt] = Field(default_factory=dict)
    inventory: list[str] = Field(default_factory=list)
    session_history: list[str] = Field(default_factory=list)


class DiceResult(BaseModel):
    """One luck roll: a positive die against a negative die."""

    model_config = ConfigDict(frozen=True)

    positive: int = Field(ge=1)
    negative: int = Field(ge=1)
    net: int
    exploded: bool = False

    @model_validator(mode="after")
    def _net_matches_sides(self) -> DiceResult:
        if self.net != self.positive - self.negative:
            raise ValueError(
                f"net must equal positive - negative ({self.positive} - {self.negative}), got {self.net}"
            )
        return self


class ActionResult(BaseModel):
    """A resolved action and the roll that produced it."""

    model_config = ConfigDict(frozen=True)

    success: bool
    degree: NonNegativeInt
    description: str
    dice_result: DiceResult


class Message(BaseModel):
    """A single entry in a session's append-only message log."""

    id: str
    seq: int
    sender: Sender
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Session(BaseModel):
    """A play session: at most one character plus its message log."""

    id: str
    name: str
    character: Character | None = None
    messages: list[Message] = Field(default_factory=list)
    current_location: str = "Unknown"
    active_npcs: list[str] = Field(default_factory=list)
    narrative_state: str = "Beginning of adventure"
    timeline: list[str] = Field(default_factory=list)
