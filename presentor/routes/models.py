"""Pydantic request models for API endpoints."""

from pydantic import BaseModel


class SaveContent(BaseModel):
    path: str
    content: str


class CreatePresentation(BaseModel):
    title: str = ""
    dir: str | None = None


class ImportImage(BaseModel):
    source_path: str
    dir: str | None = None


class UpdateAISettings(BaseModel):
    provider: str | None = None
    api_key: str | None = None
    base_url: str | None = None
    model_name: str | None = None


class UpdateSettings(BaseModel):
    storage_directory: str | None = None
    onboarded: bool | None = None
    ai: UpdateAISettings | None = None
