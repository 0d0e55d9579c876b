"""Create a demo session for development/testing."""

import random
import shutil

from urb_companion import session
from urb_companion.models import Session
from urb_companion.storage import Storage

DEMO_SESSION_NAME = "Shadows over Richland"

DEMO_CHARACTER = {
    "name": "Aria",
    "race": "TWILIGHTER",
    "background": "A Mathix-sensitive courier who grew up on the edge of the Twilight Zones.",
}

DEMO_TURNS = [
    ("chat", "Hello there, stranger."),
    ("chat", "Tell me about Richland."),
    ("action", "perception", 5),
    ("action", "climbing", 4),
]


def create_demo_data(storage: Storage, seed: int = 7) -> Session:
    """Wipe existing sessions and create one fresh demo session."""
    sessions_dir = storage.base_path / "sessions"
    if sessions_dir.exists():
        shutil.rmtree(sessions_dir)
    sessions_dir.mkdir(parents=True, exist_ok=True)

    rng = random.Random(seed)
    demo = session.start_session(storage, DEMO_SESSION_NAME)
    session.create_session_character(storage, demo.id, rng=rng, **DEMO_CHARACTER)
    for kind, *args in DEMO_TURNS:
        if kind == "chat":
            session.send_message(storage, demo.id, *args)
        else:
            session.attempt_action(storage, demo.id, *args, rng=rng)
    return storage.get_session(demo.id)
