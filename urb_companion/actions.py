"""Action resolution — turns a character, an action and a difficulty into an outcome.

    result = base value + experience modifier - difficulty + roll net

A result above zero succeeds; zero or below fails (there is no draw). The
magnitude of the result is the degree, which picks one of three tiers per side:

  degree 0-2   narrow
  degree 3-5   clear / significant
  degree 6+    extraordinary / catastrophic

An exploded roll appends " (Exploding dice!)" to the tier text.
"""

from __future__ import annotations

from numbers import Integral

from urb_companion.attributes import resolve_base_value
from urb_companion.dice import RandomSource, roll
from urb_companion.models import ActionResult, Character

# (min_degree, success text, failure text), checked top-down
OUTCOME_TIERS = (
    (6, "Extraordinary success!", "Catastrophic failure!"),
    (3, "Clear success!", "Significant failure!"),
    (0, "Narrow success!", "Narrow failure!"),
)

EXPLODED_SUFFIX = " (Exploding dice!)"


def describe_outcome(success: bool, degree: int, exploded: bool = False) -> str:
    """Return the narrative tier text for a result."""
    for min_degree, success_text, failure_text in OUTCOME_TIERS:
        if degree >= min_degree:
            break
    text = success_text if success else failure_text
    if exploded:
        text += EXPLODED_SUFFIX
    return text


def resolve_action(
    character: Character,
    action: str,
    difficulty: int,
    rng: RandomSource | None = None,
) -> ActionResult:
    """Resolve one attempt at ``action``. The character is not modified."""
    if isinstance(difficulty, bool) or not isinstance(difficulty, Integral):
        raise ValueError(f"difficulty must be an integer, got {difficulty!r}")

    base_value = resolve_base_value(character, action)
    challenge_value = -int(difficulty)
    dice_result = roll(rng)

    result_value = base_value + character.experience_modifier + challenge_value + dice_result.net
    success = result_value > 0
    degree = abs(result_value)

    return ActionResult(
        success=success,
        degree=degree,
        description=describe_outcome(success, degree, dice_result.exploded),
        dice_result=dice_result,
    )
