"""Image asset import/list/delete endpoints."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from presentor import storage
from presentor.models import IMAGE_EXTENSIONS

from .models import ImportImage
from .settings import resolve_storage_dir

router = APIRouter()


@router.get("/images")
async def list_images(request: Request, dir: str | None = None):
    """List image assets of a storage root."""
    try:
        return storage.list_images(resolve_storage_dir(request, dir))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))


@router.post("/images", status_code=201)
async def import_image(request: Request, body: ImportImage):
    """Copy an image into the storage root. Returns the stored file name."""
    root = resolve_storage_dir(request, body.dir)
    try:
        filename = storage.import_image(root, body.source_path)
    except storage.InvalidSourcePathError as e:
        raise HTTPException(400, str(e))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    return {"filename": filename, "path": str(storage.images_dir(root) / filename)}


@router.get("/images/file")
async def image_file(path: str):
    """Serve the bytes of an image asset."""
    image = Path(path)
    if image.suffix[1:].lower() not in IMAGE_EXTENSIONS or not image.is_file():
        raise HTTPException(404, "Image not found")
    return FileResponse(path)


@router.delete("/images")
async def delete_image(path: str):
    """Delete an image asset."""
    try:
        storage.delete_image(path)
    except storage.NotFoundError as e:
        raise HTTPException(404, str(e))
    except storage.StorageError as e:
        raise HTTPException(500, str(e))
    return {"ok": True}
