import logging
import os
import random
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.config import get_config
from backend.routes import router
from urb_companion.storage import Storage

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def dice_rng(seed: int | str | None) -> random.Random:
    """Seeded random.Random when a seed is given, otherwise a fresh OS-seeded one."""
    if seed is None or seed == "":
        return random.Random()
    try:
        return random.Random(int(seed))
    except ValueError as e:
        raise ValueError(f"URB_DICE_SEED / dice_seed must be an integer, got {seed!r}") from e


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage = Storage(resolved)
    seed = os.getenv("URB_DICE_SEED") or get_config(resolved)["dice_seed"]

    app = FastAPI(title="URB Companion")
    app.state.storage = storage
    app.state.rng = dice_rng(seed)
    app.include_router(router, prefix="/api")

    logger.debug("app created data_dir=%s seeded=%s", resolved, seed is not None)
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
