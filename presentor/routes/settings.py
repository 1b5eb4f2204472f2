"""Health check, default storage root, and settings endpoints."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request

from presentor import storage

from .models import UpdateSettings

router = APIRouter()


def resolve_storage_dir(request: Request, given: str | None) -> Path:
    """Explicit dir, else the configured storage directory, else the default root."""
    if given:
        return Path(given)
    try:
        configured = storage.get_settings(request.app.state.config_dir)["storage_directory"]
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    if configured:
        return Path(configured)
    try:
        return storage.default_storage_root()
    except storage.NoDocumentsDirectoryError as e:
        raise HTTPException(503, str(e))


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/storage-root")
async def storage_root():
    """Default storage root (<documents>/Presentor). Not created."""
    try:
        return {"path": str(storage.default_storage_root())}
    except storage.NoDocumentsDirectoryError as e:
        raise HTTPException(503, str(e))


@router.get("/settings")
async def get_settings(request: Request):
    """Get editor settings (storage directory, onboarding, AI provider)."""
    try:
        return storage.get_settings(request.app.state.config_dir)
    except storage.StorageError as e:
        raise HTTPException(500, str(e))


@router.patch("/settings")
async def update_settings(request: Request, body: UpdateSettings):
    """Update editor settings (partial merge)."""
    fields = body.model_dump(exclude_unset=True)
    try:
        return storage.update_settings(request.app.state.config_dir, fields)
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
