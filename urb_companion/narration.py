"""Handlebars templates for the lines the session layer writes to the log.

Free text (names, actions, descriptions) is rendered with triple-stash so it
reaches the log unescaped; the log is plain text, not HTML.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pybars

from urb_companion.dice import format_roll
from urb_companion.models import ActionResult, Character, race_display_name

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}

SESSION_WELCOME = "Welcome to the URB World! Create a character to begin your adventure."

CHARACTER_WELCOME = (
    "Welcome, {{{name}}} of the {{{race}}}! "
    "Your adventure in the URB world begins now."
)

ACTION_ATTEMPT = "{{{name}}} attempts to {{{action}}} (Difficulty: {{difficulty}})...\n{{{roll}}}"

ACTION_OUTCOME = (
    "{{{description}}} Your attempt to {{{action}}} "
    "{{#if success}}succeeds{{else}}fails{{/if}}{{#if dramatic}} dramatically{{/if}}."
)

NO_CHARACTER_ACTION = "You need a character to perform actions."

NO_CHARACTER_CHAT = "Please create a character before continuing your adventure."


class NarrationError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


def render(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise NarrationError(f"Template error: {e}") from e


def character_welcome(character: Character) -> str:
    return render(CHARACTER_WELCOME, {
        "name": character.name,
        "race": race_display_name(character.race),
    })


def action_attempt(character: Character, action: str, difficulty: int, result: ActionResult) -> str:
    return render(ACTION_ATTEMPT, {
        "name": character.name,
        "action": action,
        "difficulty": difficulty,
        "roll": format_roll(result.dice_result),
    })


def action_outcome(action: str, result: ActionResult, dramatic_degree: int = 3) -> str:
    """DM line for a resolved action; "dramatically" once degree exceeds dramatic_degree."""
    return render(ACTION_OUTCOME, {
        "description": result.description,
        "action": action,
        "success": result.success,
        "dramatic": result.degree > dramatic_degree,
    })
