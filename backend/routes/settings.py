"""Health check, settings, and world lore endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from backend.config import get_config, update_config
from urb_companion.knowledge import lookup_lore
from urb_companion.storage import Storage

from .deps import get_storage
from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(storage: Storage = Depends(get_storage)):
    """Get app settings (defaults merged with stored values)."""
    return get_config(storage.base_path)


@router.patch("/settings")
async def update_settings(
    body: UpdateSettings, request: Request, storage: Storage = Depends(get_storage)
):
    """Update settings. A new dice_seed reseeds the app's dice immediately.

    Sending dice_seed: null clears the seed; other fields ignore null.
    """
    fields = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "dice_seed"
    }
    config = update_config(storage.base_path, fields)
    if "dice_seed" in fields:
        request.app.state.rng.seed(fields["dice_seed"])
    return config


@router.get("/lore")
async def get_lore():
    """All world lore, grouped by category."""
    return lookup_lore()


@router.get("/lore/{category}")
async def get_lore_category(category: str):
    """Lore entries for one category (locations, races, concepts, ...)."""
    lore = lookup_lore(category)
    if not lore:
        raise HTTPException(404, "Lore category not found")
    return lore[category]
