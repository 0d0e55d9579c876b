"""Action resolution and free dice roll endpoints."""

from random import Random

from fastapi import APIRouter, Depends, HTTPException

from backend.config import get_config
from urb_companion.dice import format_roll, roll
from urb_companion.session import SessionNotFoundError, attempt_action
from urb_companion.storage import Storage

from .deps import get_rng, get_storage
from .models import ActionBody

router = APIRouter()


@router.post("/sessions/{session_id}/actions")
async def resolve_session_action(
    session_id: str,
    body: ActionBody,
    storage: Storage = Depends(get_storage),
    rng: Random = Depends(get_rng),
):
    """Attempt an action with the session's character.

    Returns {"result": ActionResult | null, "messages": [...]}; result is null
    when the session has no character yet.
    """
    config = get_config(storage.base_path)
    difficulty = body.difficulty if body.difficulty is not None else config["default_difficulty"]
    try:
        result, messages = attempt_action(
            storage, session_id, body.action, difficulty,
            rng=rng, dramatic_degree=config["dramatic_degree"],
        )
    except SessionNotFoundError:
        raise HTTPException(404, "Session not found")
    except ValueError as e:
        raise HTTPException(422, str(e))
    return {"result": result, "messages": messages}


@router.post("/roll")
async def roll_luck(rng: Random = Depends(get_rng)):
    """Roll the luck dice without an action attached."""
    result = roll(rng)
    return {"result": result, "text": format_roll(result)}
