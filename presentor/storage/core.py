"""Storage root resolution, directory bootstrap, and slug utilities."""

import os
import re
import unicodedata
from pathlib import Path

import platformdirs

from .errors import NoDocumentsDirectoryError, StorageIOError

APP_FOLDER = "Presentor"
IMAGES_FOLDER = "images"


def slugify(title: str) -> str:
    """Convert a title to a filesystem-safe slug.

    "Q3 Roadmap: Draft" → "q3-roadmap-draft"
    """
    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"['\"]", "", text)  # strip apostrophes/quotes before hyphenation
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = text.strip("-")
    return text or "untitled"


def default_storage_root() -> Path:
    """Return <user documents>/Presentor without creating it.

    PRESENTOR_HOME, when set, wins over the platform lookup.
    """
    override = os.getenv("PRESENTOR_HOME", "")
    if override:
        return Path(override)
    documents = platformdirs.user_documents_dir()
    if not documents or documents.startswith("~"):
        raise NoDocumentsDirectoryError("Could not find documents directory")
    return Path(documents) / APP_FOLDER


def ensure_directory(path: Path) -> None:
    """Create path and any missing parents. No-op if it already exists."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(f"Failed to create directory {path}", e) from e


def images_dir(storage_dir: Path) -> Path:
    return Path(storage_dir) / IMAGES_FOLDER
