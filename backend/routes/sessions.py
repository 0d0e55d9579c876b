"""Session CRUD + message log + chat endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from urb_companion.session import SessionNotFoundError, send_message, start_session
from urb_companion.storage import Storage

from .deps import get_storage
from .models import ChatBody, CreateSession

router = APIRouter()


@router.get("/sessions")
async def list_sessions(storage: Storage = Depends(get_storage)):
    """List all stored sessions (id and name)."""
    return storage.list_sessions()


@router.post("/sessions", status_code=201)
async def create_session(body: CreateSession, storage: Storage = Depends(get_storage)):
    """Start a new session."""
    return start_session(storage, body.name)


@router.get("/sessions/{session_id}")
async def get_session(session_id: str, storage: Storage = Depends(get_storage)):
    """Get a full session: character and message log."""
    session = storage.get_session(session_id)
    if not session:
        raise HTTPException(404, "Session not found")
    return session


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, storage: Storage = Depends(get_storage)):
    """Delete a session and everything in it."""
    if not storage.delete_session(session_id):
        raise HTTPException(404, "Session not found")
    return {"ok": True}


@router.get("/sessions/{session_id}/messages")
async def get_messages(session_id: str, storage: Storage = Depends(get_storage)):
    """Get the message log for a session."""
    session = storage.get_session(session_id)
    if not session:
        raise HTTPException(404, "Session not found")
    return session.messages


@router.post("/sessions/{session_id}/messages")
async def chat(session_id: str, body: ChatBody, storage: Storage = Depends(get_storage)):
    """Send a player message. Returns the messages appended this turn."""
    try:
        return send_message(storage, session_id, body.message)
    except SessionNotFoundError:
        raise HTTPException(404, "Session not found")
