"""Session orchestration — one player interaction end-to-end.

Interactions:
  start_session            → new session with the opening DM line
  create_session_character → roll a character; first character gets a welcome line
  update_session_character → external edits (name, race, inventory, progression)
  send_message             → player line + narrator line
  attempt_action           → system line with the roll + DM line with the outcome

Each interaction loads the session, appends to its message log and persists it.
A session without a character never reaches the engine: chat and actions get a
system notice instead.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from urb_companion import narration
from urb_companion.actions import resolve_action
from urb_companion.characters import create_character
from urb_companion.dice import RandomSource
from urb_companion.knowledge import KeywordNarrator, Narrator
from urb_companion.models import ActionResult, Character, Message, Sender, Session
from urb_companion.storage import Storage

logger = logging.getLogger(__name__)

_default_narrator = KeywordNarrator()


class SessionNotFoundError(LookupError):
    """Raised when a session id does not name a stored session."""


class CharacterNotFoundError(LookupError):
    """Raised when a character operation targets a session without a character."""


def _load(storage: Storage, session_id: str) -> Session:
    session = storage.get_session(session_id)
    if session is None:
        raise SessionNotFoundError(f"Session {session_id!r} not found")
    return session


def _new_messages(session: Session):
    """Return (messages, append) where append(sender, content) continues the log's seq."""
    seq = max((m.seq for m in session.messages), default=0)
    messages: list[Message] = []

    def append(sender: Sender, content: str) -> Message:
        nonlocal seq
        seq += 1
        msg = Message(id=uuid.uuid4().hex[:12], seq=seq, sender=sender, content=content)
        messages.append(msg)
        return msg

    return messages, append


def start_session(storage: Storage, name: str) -> Session:
    session = storage.create_session(name)
    messages, append = _new_messages(session)
    append("dm", narration.SESSION_WELCOME)
    session.messages.extend(messages)
    storage.save_session(session)
    logger.debug("started session id=%s name=%r", session.id, name)
    return session


def create_session_character(
    storage: Storage,
    session_id: str,
    name: str,
    race: str,
    background: str = "",
    rng: RandomSource | None = None,
) -> Character:
    """Roll a new character into the session, replacing any existing one."""
    session = _load(storage, session_id)
    character = create_character(name, race, background, rng=rng)
    messages, append = _new_messages(session)
    if session.character is None:
        append("dm", narration.character_welcome(character))
    session.character = character
    session.messages.extend(messages)
    storage.save_session(session)
    logger.debug("created character id=%s race=%s session=%s", character.id, race, session_id)
    return character


def update_session_character(
    storage: Storage, session_id: str, fields: dict[str, Any]
) -> Character:
    """Apply external edits to the session's character and persist them.

    The merged character is re-validated, so a bad race or a negative life
    force raises pydantic's ValidationError. The id cannot change.
    """
    session = _load(storage, session_id)
    if session.character is None:
        raise CharacterNotFoundError(f"Session {session_id!r} has no character")
    if "id" in fields and fields["id"] != session.character.id:
        raise ValueError("Character id cannot be changed")
    updated = Character.model_validate({**session.character.model_dump(), **fields})
    storage.save_character(session_id, updated)
    return updated


def send_message(
    storage: Storage,
    session_id: str,
    text: str,
    narrator: Narrator | None = None,
) -> list[Message]:
    """Append a player line and the response to it. Blank input is ignored."""
    session = _load(storage, session_id)
    if not text.strip():
        return []
    messages, append = _new_messages(session)

    append("player", text)
    if session.character is None:
        append("system", narration.NO_CHARACTER_CHAT)
    else:
        append("dm", (narrator or _default_narrator)(text, session.character))

    storage.append_messages(session_id, messages)
    return messages


def attempt_action(
    storage: Storage,
    session_id: str,
    action: str,
    difficulty: int,
    rng: RandomSource | None = None,
    dramatic_degree: int = 3,
) -> tuple[ActionResult | None, list[Message]]:
    """Resolve an action for the session's character and log the outcome.

    Returns (result, new messages). Without a character the engine is not
    invoked: result is None and the only message is a system notice.
    """
    session = _load(storage, session_id)
    messages, append = _new_messages(session)
    character = session.character

    if character is None:
        append("system", narration.NO_CHARACTER_ACTION)
        storage.append_messages(session_id, messages)
        return None, messages

    result = resolve_action(character, action, difficulty, rng=rng)
    logger.debug(
        "resolved action=%r difficulty=%d success=%s degree=%d exploded=%s",
        action, difficulty, result.success, result.degree, result.dice_result.exploded,
    )
    append("system", narration.action_attempt(character, action, difficulty, result))
    append("dm", narration.action_outcome(action, result, dramatic_degree))

    storage.append_messages(session_id, messages)
    return result, messages
