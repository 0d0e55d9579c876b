"""Session character endpoints."""

from random import Random

from fastapi import APIRouter, Depends, HTTPException

from urb_companion.session import (
    CharacterNotFoundError,
    SessionNotFoundError,
    create_session_character,
    update_session_character,
)
from urb_companion.storage import Storage

from .deps import get_rng, get_storage
from .models import CreateCharacter, UpdateCharacter

router = APIRouter()


@router.get("/sessions/{session_id}/character")
async def get_character(session_id: str, storage: Storage = Depends(get_storage)):
    """Get the session's character."""
    session = storage.get_session(session_id)
    if not session:
        raise HTTPException(404, "Session not found")
    if not session.character:
        raise HTTPException(404, "Character not found")
    return session.character


@router.post("/sessions/{session_id}/character", status_code=201)
async def create_character(
    session_id: str,
    body: CreateCharacter,
    storage: Storage = Depends(get_storage),
    rng: Random = Depends(get_rng),
):
    """Roll a new character for the session, replacing any existing one."""
    try:
        return create_session_character(
            storage, session_id, body.name, body.race, body.background, rng=rng
        )
    except SessionNotFoundError:
        raise HTTPException(404, "Session not found")


@router.patch("/sessions/{session_id}/character")
async def update_character(
    session_id: str, body: UpdateCharacter, storage: Storage = Depends(get_storage)
):
    """Edit name, background, race, life force, experience modifier or inventory."""
    try:
        return update_session_character(storage, session_id, body.model_dump(exclude_none=True))
    except SessionNotFoundError:
        raise HTTPException(404, "Session not found")
    except CharacterNotFoundError:
        raise HTTPException(404, "Character not found")
    except ValueError as e:
        raise HTTPException(422, str(e))
