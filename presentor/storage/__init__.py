"""File-based storage for presentation documents and their image assets.

Data layout (the storage root is supplied by the caller on every call):
  <storage root>/
    <slug>-<millis>.json   Presentation documents (meta + slides)
    images/                Imported image assets (png, jpg, jpeg, gif, webp, svg, bmp)
  <config dir>/
    settings.json          Editor settings (storage directory, onboarding, AI provider)

There is no manifest or index: the directory listing is the catalog, and
every call re-reads the filesystem. Nothing is cached between calls.

Image imports keep the source file name and append -1, -2, ... to the stem
until the name is free. Existing files are never overwritten.

Errors: every failure raises a StorageError subclass (NotFoundError,
InvalidSourcePathError, StorageIOError, NoDocumentsDirectoryError) carrying
the underlying OSError as `cause`.
"""

# Re-export all public symbols so `from presentor import storage` works.

from .errors import (  # noqa: F401
    InvalidSourcePathError,
    NoDocumentsDirectoryError,
    NotFoundError,
    StorageError,
    StorageIOError,
)

from .core import (  # noqa: F401
    APP_FOLDER,
    IMAGES_FOLDER,
    default_storage_root,
    ensure_directory,
    images_dir,
    slugify,
)

from .presentations import (  # noqa: F401
    delete_presentation,
    list_presentations,
    load_presentation,
    new_presentation,
    new_presentation_path,
    read_presentation,
    save_presentation,
    store_presentation,
)

from .images import (  # noqa: F401
    delete_image,
    import_image,
    list_images,
    unique_filename,
)

from .config import (  # noqa: F401
    default_config_dir,
    get_settings,
    update_settings,
)
