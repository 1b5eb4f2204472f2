"""Presentation document list/read/save/delete endpoints."""

from fastapi import APIRouter, HTTPException, Request

from presentor import storage

from .models import CreatePresentation, SaveContent
from .settings import resolve_storage_dir

router = APIRouter()


@router.get("/presentations")
async def list_presentations(request: Request, dir: str | None = None):
    """List presentation files in a storage root (created if missing)."""
    try:
        return storage.list_presentations(resolve_storage_dir(request, dir))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))


@router.post("/presentations", status_code=201)
async def create_presentation(request: Request, body: CreatePresentation):
    """Create and save a new one-slide presentation."""
    root = resolve_storage_dir(request, body.dir)
    presentation = (
        storage.new_presentation(body.title) if body.title else storage.new_presentation()
    )
    path = storage.new_presentation_path(root, presentation.meta.title)
    try:
        storage.store_presentation(path, presentation)
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    return {"path": str(path), "presentation": presentation.model_dump(by_alias=True)}


@router.get("/presentations/content")
async def read_presentation(path: str):
    """Raw text content of a presentation file."""
    try:
        return {"content": storage.read_presentation(path)}
    except storage.NotFoundError as e:
        raise HTTPException(404, str(e))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))


@router.put("/presentations/content")
async def save_presentation(body: SaveContent):
    """Write a presentation file, replacing any existing content."""
    try:
        storage.save_presentation(body.path, body.content)
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    return {"ok": True}


@router.get("/presentations/document")
async def load_presentation(path: str):
    """Parsed and validated presentation (meta + slides)."""
    try:
        presentation = storage.load_presentation(path)
    except storage.NotFoundError as e:
        raise HTTPException(404, str(e))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    except ValueError as e:
        raise HTTPException(400, f"Invalid presentation file: {e}")
    return presentation.model_dump(by_alias=True)


@router.delete("/presentations")
async def delete_presentation(path: str):
    """Delete a presentation file."""
    try:
        storage.delete_presentation(path)
    except storage.NotFoundError as e:
        raise HTTPException(404, str(e))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    return {"ok": True}
