"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, settings, lore), sessions (CRUD, message
log, chat), characters (one per session), actions (action resolution, free
dice roll). A session's character, messages and actions are nested under
/api/sessions/{session_id}/.
"""

from fastapi import APIRouter

from .actions import router as actions_router
from .characters import router as characters_router
from .sessions import router as sessions_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(sessions_router)
router.include_router(characters_router)
router.include_router(actions_router)
