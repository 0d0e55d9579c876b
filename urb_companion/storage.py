"""JSON file storage.

Sessions are stored as one JSON file each under a configurable base
directory, keyed by session id. There is no database or ORM. Reads and writes
go through plain helper methods that load and dump JSON.

Directory layout:

    {base}/
      sessions/
        {session_id}.json     ← Session: character + message log
"""

from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path

from urb_companion.models import Character, Message, Session

logger = logging.getLogger(__name__)

_SESSION_ID_RE = re.compile(r"^[a-z0-9]+$")


def new_session_id() -> str:
    return uuid.uuid4().hex[:12]


class Storage:
    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._sessions_root = base_path / "sessions"
        self._sessions_root.mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        return self._base

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _session_file(self, session_id: str) -> Path | None:
        """Path for a session id, or None if the id is malformed."""
        if not _SESSION_ID_RE.match(session_id):
            logger.warning("Rejected malformed session id %r", session_id)
            return None
        return self._sessions_root / f"{session_id}.json"

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def create_session(self, name: str) -> Session:
        session = Session(id=new_session_id(), name=name)
        self.save_session(session)
        return session

    def get_session(self, session_id: str) -> Session | None:
        path = self._session_file(session_id)
        if path is None or not path.exists():
            return None
        return Session.model_validate_json(path.read_text())

    def save_session(self, session: Session) -> None:
        """Upsert a session by id."""
        path = self._session_file(session.id)
        if path is None:
            raise ValueError(f"Invalid session id {session.id!r}")
        path.write_text(session.model_dump_json(indent=2))
        logger.debug("saved session id=%s messages=%d", session.id, len(session.messages))

    def list_sessions(self) -> list[dict]:
        """Return [{"id", "name"}] for every stored session, sorted by name."""
        sessions = []
        for path in self._sessions_root.glob("*.json"):
            session = self.get_session(path.stem)
            if session is not None:
                sessions.append({"id": session.id, "name": session.name})
        return sorted(sessions, key=lambda s: (s["name"].lower(), s["id"]))

    def delete_session(self, session_id: str) -> bool:
        path = self._session_file(session_id)
        if path is None or not path.exists():
            return False
        path.unlink()
        return True

    # ------------------------------------------------------------------
    # Character
    # ------------------------------------------------------------------

    def save_character(self, session_id: str, character: Character) -> Session | None:
        """Replace the session's character. Returns None if the session is missing."""
        session = self.get_session(session_id)
        if session is None:
            return None
        session.character = character
        self.save_session(session)
        return session

    # ------------------------------------------------------------------
    # Messages (append-only)
    # ------------------------------------------------------------------

    def get_messages(self, session_id: str) -> list[Message]:
        session = self.get_session(session_id)
        if session is None:
            return []
        return session.messages

    def append_messages(self, session_id: str, messages: list[Message]) -> Session | None:
        session = self.get_session(session_id)
        if session is None:
            return None
        session.messages.extend(messages)
        self.save_session(session)
        return session
