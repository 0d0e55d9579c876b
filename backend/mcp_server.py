"""FastMCP server exposing the action resolution engine as MCP tools.

Tools:
  - roll_luck()                                  — one luck roll
  - resolve_character_action(session_id, ...)    — attempt an action in a session
  - create_session_character(session_id, ...)    — roll a character into a session
  - lookup_lore(category)                        — static world lore

Session tools work against a module-level Storage replaced via set_storage()
for tests, or opened on data/ when run as __main__.

Usage:
    uv run python -m backend.mcp_server
"""

import logging

from mcp.server.fastmcp import FastMCP

from backend.config import get_config
from urb_companion import knowledge, session
from urb_companion.dice import format_roll, roll
from urb_companion.storage import Storage

logger = logging.getLogger(__name__)

mcp = FastMCP("urb-companion")

_storage: Storage | None = None


def set_storage(storage: Storage) -> None:
    """Replace the active storage (used in tests)."""
    global _storage
    _storage = storage


def get_storage() -> Storage:
    if _storage is None:
        raise RuntimeError("Call set_storage() before using session tools")
    return _storage


@mcp.tool()
def roll_luck() -> dict:
    """Roll a positive d10 against a negative d10; 10s explode."""
    result = roll()
    return {**result.model_dump(), "text": format_roll(result)}


@mcp.tool()
def resolve_character_action(session_id: str, action: str, difficulty: int | None = None) -> dict:
    """Attempt an action with a session's character and log the outcome.

    Without a difficulty the configured default_difficulty is used.
    """
    storage = get_storage()
    config = get_config(storage.base_path)
    if difficulty is None:
        difficulty = config["default_difficulty"]
    result, messages = session.attempt_action(
        storage, session_id, action, difficulty, dramatic_degree=config["dramatic_degree"]
    )
    logger.debug("mcp action session=%s action=%r resolved=%s", session_id, action, result is not None)
    return {
        "result": result.model_dump() if result else None,
        "messages": [m.content for m in messages],
    }


@mcp.tool()
def create_session_character(session_id: str, name: str, race: str, background: str = "") -> dict:
    """Roll a new character (race: SOLOZO, BARAB, TWILIGHTER or OTHER) into a session."""
    character = session.create_session_character(get_storage(), session_id, name, race, background)
    return character.model_dump()


@mcp.tool()
def lookup_lore(category: str | None = None) -> dict:
    """Look up world lore, optionally for a single category."""
    return knowledge.lookup_lore(category)


if __name__ == "__main__":
    from pathlib import Path
    set_storage(Storage(Path(__file__).parent.parent / "data"))
    mcp.run()
