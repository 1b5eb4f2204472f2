"""Tests for slugify, directory bootstrap, and the default storage root."""

from pathlib import Path

import pytest

from presentor import storage


# ── Slugify ──────────────────────────────────────────────────


def test_slugify_basic():
    assert storage.slugify("Quarterly Review") == "quarterly-review"


def test_slugify_punctuation():
    assert storage.slugify("Q3 Roadmap: Draft!") == "q3-roadmap-draft"


def test_slugify_unicode():
    assert storage.slugify("Café Münch") == "cafe-munch"


def test_slugify_empty():
    assert storage.slugify("") == "untitled"
    assert storage.slugify("!!!") == "untitled"


# ── ensure_directory ─────────────────────────────────────────


def test_ensure_directory_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    storage.ensure_directory(target)
    assert target.is_dir()


def test_ensure_directory_idempotent(tmp_path):
    target = tmp_path / "docs"
    storage.ensure_directory(target)
    (target / "keep.json").write_text("{}")
    storage.ensure_directory(target)
    assert (target / "keep.json").read_text() == "{}"


def test_ensure_directory_over_file_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir")
    with pytest.raises(storage.StorageIOError) as exc:
        storage.ensure_directory(blocker / "child")
    assert exc.value.cause is not None
    assert isinstance(exc.value.__cause__, OSError)


# ── default_storage_root ─────────────────────────────────────


def test_default_storage_root_uses_documents_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "platformdirs.user_documents_dir", lambda: str(tmp_path / "Documents")
    )
    root = storage.default_storage_root()
    assert root == tmp_path / "Documents" / "Presentor"
    assert not root.exists()


def test_default_storage_root_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("PRESENTOR_HOME", str(tmp_path / "custom"))
    assert storage.default_storage_root() == tmp_path / "custom"


def test_default_storage_root_missing_documents(monkeypatch):
    monkeypatch.setattr("platformdirs.user_documents_dir", lambda: "")
    with pytest.raises(storage.NoDocumentsDirectoryError):
        storage.default_storage_root()


def test_default_storage_root_unexpanded_home(monkeypatch):
    monkeypatch.setattr("platformdirs.user_documents_dir", lambda: "~/Documents")
    with pytest.raises(storage.NoDocumentsDirectoryError):
        storage.default_storage_root()


def test_images_dir():
    assert storage.images_dir(Path("/data/Presentor")) == Path("/data/Presentor/images")


# ── Error formatting ─────────────────────────────────────────


def test_error_text_includes_cause():
    err = storage.NotFoundError("Failed to read file", FileNotFoundError("no such file"))
    assert str(err) == "Failed to read file: no such file"


def test_error_without_cause():
    assert str(storage.InvalidSourcePathError("Invalid source path")) == "Invalid source path"
