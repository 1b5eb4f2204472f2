"""Core domain models.

Directory listings are reported as FileEntry / ImageEntry; the contents of a
presentation document are described by Presentation. Pydantic is used for
validation and serialisation at every data boundary.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePath
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp", "svg", "bmp"})

Theme = Literal["dark-corporate", "light-minimal", "gradient-modern"]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FileEntry(BaseModel):
    """A presentation document found by a directory listing."""

    name: str
    path: str
    is_dir: bool = False  # listings only ever report files

    @model_validator(mode="after")
    def _name_matches_path(self) -> FileEntry:
        if not self.name.endswith(".json"):
            raise ValueError(f"not a presentation file: {self.name}")
        if PurePath(self.path).name != self.name:
            raise ValueError(f"path {self.path} does not end in {self.name}")
        return self


class ImageEntry(BaseModel):
    """An image asset inside a storage root's images directory."""

    name: str
    path: str

    @field_validator("name")
    @classmethod
    def _allowed_extension(cls, name: str) -> str:
        if PurePath(name).suffix[1:].lower() not in IMAGE_EXTENSIONS:
            raise ValueError(f"not an image file: {name}")
        return name


class Slide(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    html: str
    notes: str = ""


class PresentationMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    created_at: str = Field(default_factory=_now, alias="createdAt")
    updated_at: str = Field(default_factory=_now, alias="updatedAt")
    theme: Theme = "dark-corporate"


class Presentation(BaseModel):
    """A saved presentation. Serialised with camelCase keys on disk.

    Keys this model does not know about are kept and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    meta: PresentationMeta
    slides: list[Slide] = Field(default_factory=list)

    def touch(self) -> None:
        self.meta.updated_at = _now()
