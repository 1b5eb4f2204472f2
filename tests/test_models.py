"""Tests for presentor.models."""

import json

import pytest
from pydantic import ValidationError

from presentor.models import FileEntry, ImageEntry, Presentation, PresentationMeta, Slide


class TestFileEntry:
    def test_required_fields(self) -> None:
        e = FileEntry(name="deck.json", path="/data/deck.json")
        assert e.name == "deck.json"
        assert e.is_dir is False

    def test_non_json_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FileEntry(name="deck.txt", path="/data/deck.txt")

    def test_path_must_end_with_name(self) -> None:
        with pytest.raises(ValidationError):
            FileEntry(name="deck.json", path="/data/other.json")

    def test_serialise_roundtrip(self) -> None:
        e = FileEntry(name="deck.json", path="decks/deck.json")
        assert FileEntry.model_validate(e.model_dump()) == e


class TestImageEntry:
    def test_extension_case_insensitive(self) -> None:
        assert ImageEntry(name="y.PNG", path="/i/y.PNG").name == "y.PNG"

    def test_disallowed_extension(self) -> None:
        with pytest.raises(ValidationError):
            ImageEntry(name="notes.txt", path="/i/notes.txt")

    def test_no_extension(self) -> None:
        with pytest.raises(ValidationError):
            ImageEntry(name="scan", path="/i/scan")


class TestPresentation:
    def test_meta_defaults(self) -> None:
        meta = PresentationMeta(title="Deck")
        assert meta.theme == "dark-corporate"
        assert meta.created_at
        assert meta.updated_at

    def test_invalid_theme_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PresentationMeta(title="Deck", theme="neon")

    def test_dump_uses_camel_case(self) -> None:
        p = Presentation(
            meta=PresentationMeta(title="Deck", created_at="c", updated_at="u"),
            slides=[Slide(id="s1", html="<section/>")],
        )
        dumped = json.loads(p.model_dump_json(by_alias=True))
        assert dumped["meta"]["createdAt"] == "c"
        assert dumped["meta"]["updatedAt"] == "u"
        assert dumped["slides"][0]["notes"] == ""

    def test_touch_updates_timestamp(self) -> None:
        p = Presentation(meta=PresentationMeta(title="Deck", updated_at="old"))
        p.touch()
        assert p.meta.updated_at != "old"
