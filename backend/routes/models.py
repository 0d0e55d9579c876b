"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, NonNegativeInt

from urb_companion.models import Race


class CreateSession(BaseModel):
    name: str = "New Adventure"


class ChatBody(BaseModel):
    message: str


class CreateCharacter(BaseModel):
    name: str
    race: Race
    background: str = ""


class UpdateCharacter(BaseModel):
    name: str | None = None
    background: str | None = None
    race: Race | None = None
    life_force: NonNegativeInt | None = None
    experience_modifier: int | None = None
    inventory: list[str] | None = None


class ActionBody(BaseModel):
    action: str
    difficulty: int | None = None  # None → configured default_difficulty


class UpdateSettings(BaseModel):
    default_difficulty: int | None = None
    dramatic_degree: NonNegativeInt | None = None
    dice_seed: int | None = None
