"""FastAPI API endpoints under /api.

Endpoint groups: presentations (documents directly in the storage root),
images (assets under <storage root>/images), settings (health, default
storage root, editor settings). Endpoints that take an optional `dir` fall
back to the configured storage directory, then to the default storage root.
"""

from fastapi import APIRouter

from .images import router as images_router
from .presentations import router as presentations_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(presentations_router)
router.include_router(images_router)
