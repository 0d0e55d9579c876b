"""Luck roll — one positive d10 against one negative d10.

Each side explodes on its own: a 10 adds another d10 to that side, and keeps
doing so for as long as 10s come up. The recursive form of the rule ("roll
again and fold in the same side of the new roll") is equivalent to drawing
further faces for that side only, so each side is a plain accumulation loop
with no depth cap.

The random source is anything with ``randint(a, b)`` (inclusive). The
``random`` module itself qualifies and is the default; pass a seeded
``random.Random`` for reproducible rolls or an isolated stream per thread.
"""

from __future__ import annotations

import random
from typing import Protocol

from urb_companion.models import DiceResult

DIE_FACES = 10


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def roll_die(rng: RandomSource | None = None, low: int = 1, high: int = DIE_FACES) -> int:
    return (rng or random).randint(low, high)


def _roll_side(rng: RandomSource) -> tuple[int, bool]:
    """Return (total, exploded) for one side of the roll."""
    face = roll_die(rng)
    total = face
    exploded = face == DIE_FACES
    while face == DIE_FACES:
        face = roll_die(rng)
        total += face
    return total, exploded


def roll(rng: RandomSource | None = None) -> DiceResult:
    """Roll both sides and return the combined result. Never fails."""
    rng = rng or random
    positive, positive_exploded = _roll_side(rng)
    negative, negative_exploded = _roll_side(rng)
    return DiceResult(
        positive=positive,
        negative=negative,
        net=positive - negative,
        exploded=positive_exploded or negative_exploded,
    )


def format_roll(result: DiceResult) -> str:
    """Render a roll for the message log.

    "🎲 [+12] vs [-4] = Net: +8 (Exploded!)"
    """
    net = f"+{result.net}" if result.net > 0 else str(result.net)
    suffix = " (Exploded!)" if result.exploded else ""
    return f"🎲 [+{result.positive}] vs [-{result.negative}] = Net: {net}{suffix}"
