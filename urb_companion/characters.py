"""Character creation — starting stats per race.

Starting stat ranges (inclusive), rolled once at creation:

  SOLOZO      skills: technology 3-5, diplomacy 2-4, research 3-5, stealth 1-3
  BARAB       characteristics: strength 4-6, endurance 3-5, perception 2-4, agility 2-4
  TWILIGHTER  skills: mysticism 4-6, perception 3-5
              characteristics: intuition 4-6, willpower 3-5
  OTHER       skills: survival 2-4, communication 2-4
              characteristics: strength 2-4, agility 2-4

Every character also gets a life force of 5-10 and starts with no experience
modifier, inventory or history.
"""

from __future__ import annotations

import random
import uuid
from types import MappingProxyType

from urb_companion.dice import RandomSource
from urb_companion.models import RACES, Character

LIFE_FORCE_RANGE = (5, 10)

RACE_STARTING_STATS = MappingProxyType({
    "SOLOZO": MappingProxyType({
        "skills": (("technology", 3, 5), ("diplomacy", 2, 4), ("research", 3, 5), ("stealth", 1, 3)),
        "characteristics": (),
    }),
    "BARAB": MappingProxyType({
        "skills": (),
        "characteristics": (("strength", 4, 6), ("endurance", 3, 5), ("perception", 2, 4), ("agility", 2, 4)),
    }),
    "TWILIGHTER": MappingProxyType({
        "skills": (("mysticism", 4, 6), ("perception", 3, 5)),
        "characteristics": (("intuition", 4, 6), ("willpower", 3, 5)),
    }),
    "OTHER": MappingProxyType({
        "skills": (("survival", 2, 4), ("communication", 2, 4)),
        "characteristics": (("strength", 2, 4), ("agility", 2, 4)),
    }),
})


def new_character_id() -> str:
    return uuid.uuid4().hex[:13]


def _roll_stats(table: tuple[tuple[str, int, int], ...], rng: RandomSource) -> dict[str, int]:
    return {name: rng.randint(low, high) for name, low, high in table}


def create_character(
    name: str,
    race: str,
    background: str = "",
    rng: RandomSource | None = None,
) -> Character:
    """Create a character with freshly rolled starting stats for its race."""
    if race not in RACE_STARTING_STATS:
        raise ValueError(f"Unknown race {race!r}; expected one of {', '.join(RACES)}")
    rng = rng or random
    stats = RACE_STARTING_STATS[race]
    return Character(
        id=new_character_id(),
        name=name,
        race=race,
        background=background,
        life_force=rng.randint(*LIFE_FORCE_RANGE),
        experience_modifier=0,
        skills=_roll_stats(stats["skills"], rng),
        characteristics=_roll_stats(stats["characteristics"], rng),
        inventory=[],
        session_history=[],
    )
