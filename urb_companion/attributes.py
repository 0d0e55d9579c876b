"""Base value lookup — which number a character brings to an action.

Resolution order (first match wins):
  1. skill   — a skill named exactly like the action
  2. derived — floor of the mean of the characteristics the action maps to,
               counting only those the character actually has
  3. fallback — half the character's life force, rounded down
"""

from __future__ import annotations

from types import MappingProxyType

from urb_companion.models import Character

ACTION_CHARACTERISTICS = MappingProxyType({
    "lifting": ("strength",),
    "running": ("agility", "endurance"),
    "fighting": ("strength", "agility"),
    "climbing": ("strength", "agility"),
    "research": ("intelligence",),
    "persuasion": ("charisma",),
    "perception": ("perception", "intuition"),
    "stealth": ("agility",),
})


def resolve_base_value(character: Character, action: str) -> int:
    if action in character.skills:
        return character.skills[action]

    names = ACTION_CHARACTERISTICS.get(action, ())
    found = [character.characteristics[n] for n in names if n in character.characteristics]
    if found:
        # values are non-negative, so // is the floor of the mean
        return sum(found) // len(found)

    return character.life_force // 2
