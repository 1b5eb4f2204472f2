"""Image asset import, listing, and deletion under <storage root>/images.

Imports never overwrite: the stored name is the source file name, or the
first free "<stem>-<n>.<ext>" for n = 1, 2, 3, ... The check and the copy are
not atomic, so two concurrent imports of the same name can pick the same
candidate. Nothing here locks against that.
"""

import logging
import shutil
from pathlib import Path

from presentor.models import IMAGE_EXTENSIONS, ImageEntry

from .core import ensure_directory, images_dir
from .errors import InvalidSourcePathError, NotFoundError, StorageIOError

logger = logging.getLogger(__name__)


def _split_name(filename: str) -> tuple[str, str]:
    """Split on the last dot. A leading dot is part of the stem."""
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return filename, ""
    return stem, ext


def unique_filename(directory: Path, filename: str) -> str:
    """Return filename, or the first "<stem>-<n>[.<ext>]" not present in directory."""
    directory = Path(directory)
    if not (directory / filename).exists():
        return filename
    stem, ext = _split_name(filename)
    counter = 1
    while True:
        candidate = f"{stem}-{counter}.{ext}" if ext else f"{stem}-{counter}"
        if not (directory / candidate).exists():
            return candidate
        counter += 1


def list_images(storage_dir: Path) -> list[ImageEntry]:
    target = images_dir(storage_dir)
    if not target.exists():
        ensure_directory(target)
        return []
    try:
        children = sorted(target.iterdir())
    except OSError as e:
        raise StorageIOError(f"Failed to list {target}", e) from e
    return [
        ImageEntry(name=path.name, path=str(path.absolute()))
        for path in children
        if path.suffix[1:].lower() in IMAGE_EXTENSIONS and path.is_file()
    ]


def import_image(storage_dir: Path, source_path: str) -> str:
    """Copy source_path into the images directory. Returns the stored file name."""
    target = images_dir(storage_dir)
    ensure_directory(target)

    filename = Path(source_path).name if source_path else ""
    if filename in ("", ".", ".."):
        raise InvalidSourcePathError(f"Invalid source path: {source_path!r}")

    dest_filename = unique_filename(target, filename)
    if dest_filename != filename:
        logger.info("image %s already exists, storing as %s", filename, dest_filename)
    try:
        shutil.copy(source_path, target / dest_filename)
    except OSError as e:
        raise StorageIOError("Failed to copy image", e) from e
    logger.debug("imported image %s -> %s", source_path, target / dest_filename)
    return dest_filename


def delete_image(image_path: Path) -> None:
    try:
        Path(image_path).unlink()
    except FileNotFoundError as e:
        raise NotFoundError("Failed to delete image", e) from e
    except OSError as e:
        raise StorageIOError("Failed to delete image", e) from e
    logger.debug("deleted image %s", image_path)
