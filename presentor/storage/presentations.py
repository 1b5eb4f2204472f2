"""Presentation document CRUD (JSON files directly inside a storage root)."""

import logging
import time
from pathlib import Path

from presentor.models import FileEntry, Presentation, PresentationMeta, Slide

from .core import ensure_directory, slugify
from .errors import NotFoundError, StorageIOError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Presentation"

_DEFAULT_SLIDE_HTML = """<section class="slide">
    <h1>New Slide</h1>
    <p>Click to edit or use AI to generate content</p>
  </section>"""


def list_presentations(root_dir: Path) -> list[FileEntry]:
    """List *.json files directly inside root_dir, creating it if absent."""
    root = Path(root_dir)
    ensure_directory(root)
    try:
        children = sorted(root.iterdir())
    except OSError as e:
        raise StorageIOError(f"Failed to list {root}", e) from e
    return [
        FileEntry(name=path.name, path=str(path))
        for path in children
        if path.name.endswith(".json") and path.is_file()
    ]


def read_presentation(path: Path) -> str:
    try:
        return Path(path).read_bytes().decode("utf-8")
    except FileNotFoundError as e:
        raise NotFoundError("Failed to read file", e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise StorageIOError("Failed to read file", e) from e


def save_presentation(path: Path, content: str) -> None:
    """Write content to path, replacing any existing file. Not atomic."""
    path = Path(path)
    ensure_directory(path.parent)
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise StorageIOError("Failed to save file", e) from e
    logger.debug("saved presentation %s (%d chars)", path, len(content))


def delete_presentation(path: Path) -> None:
    try:
        Path(path).unlink()
    except FileNotFoundError as e:
        raise NotFoundError("Failed to delete file", e) from e
    except OSError as e:
        raise StorageIOError("Failed to delete file", e) from e
    logger.debug("deleted presentation %s", path)


def new_presentation_path(storage_dir: Path, title: str) -> Path:
    """Path for a new document: <storage_dir>/<slug>-<epoch millis>.json."""
    return Path(storage_dir) / f"{slugify(title)}-{time.time_ns() // 1_000_000}.json"


def new_presentation(title: str = DEFAULT_TITLE) -> Presentation:
    slide = Slide(id=f"slide-{time.time_ns() // 1_000_000}", html=_DEFAULT_SLIDE_HTML)
    return Presentation(meta=PresentationMeta(title=title), slides=[slide])


def load_presentation(path: Path) -> Presentation:
    """Read and validate a document. Raises ValidationError on bad content."""
    return Presentation.model_validate_json(read_presentation(path))


def store_presentation(path: Path, presentation: Presentation) -> None:
    """Refresh updatedAt and write the document as indented camelCase JSON."""
    presentation.touch()
    save_presentation(path, presentation.model_dump_json(indent=2, by_alias=True))
