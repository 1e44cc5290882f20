"""Tests for core data models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from noteserve.models import NoteRecord


class TestNoteRecord:
    """Test NoteRecord dataclass."""

    def test_create_record(self) -> None:
        """Should create NoteRecord with all fields."""
        record = NoteRecord(file="a.html", title="A", tags=["x"], content="body")

        assert record.file == "a.html"
        assert record.title == "A"
        assert record.tags == ("x",)
        assert record.content == "body"

    def test_defaults(self) -> None:
        record = NoteRecord(file="a.html", title="A")

        assert record.tags == ()
        assert record.content == ""

    def test_record_equality(self) -> None:
        assert NoteRecord("a.html", "A", ["x"], "c") == NoteRecord("a.html", "A", ["x"], "c")
        assert NoteRecord("a.html", "A", ["x"], "c") != NoteRecord("b.html", "A", ["x"], "c")

    def test_to_dict(self) -> None:
        record = NoteRecord(file="a.html", title="A", tags=["x", "y"], content="body")

        assert record.to_dict() == {
            "file": "a.html",
            "title": "A",
            "tags": ["x", "y"],
            "content": "body",
        }

    def test_to_summary_omits_content(self) -> None:
        record = NoteRecord(file="a.html", title="A", tags=["x"], content="body")

        assert record.to_summary() == {"file": "a.html", "title": "A", "tags": ["x"]}

    def test_from_dict(self) -> None:
        record = NoteRecord.from_dict(
            {"file": "a.html", "title": "A", "tags": ["x"], "content": "body"}
        )

        assert record == NoteRecord(file="a.html", title="A", tags=["x"], content="body")

    def test_from_dict_missing_tags_defaults_empty(self) -> None:
        record = NoteRecord.from_dict({"file": "a.html", "title": "A", "content": ""})

        assert record.tags == ()

    @pytest.mark.parametrize(
        "data",
        [
            {"title": "A", "tags": [], "content": ""},
            {"file": "a.html", "title": 3, "tags": [], "content": ""},
            {"file": "a.html", "title": "A", "tags": "x", "content": ""},
            {"file": "a.html", "title": "A", "tags": [1], "content": ""},
            {"file": "a.html", "title": "A", "tags": []},
            ["a.html", "A"],
        ],
    )
    def test_from_dict_rejects_invalid(self, data: object) -> None:
        with pytest.raises(ValueError):
            NoteRecord.from_dict(data)  # type: ignore[arg-type]

    def test_tags_are_stored_as_tuple(self) -> None:
        tags = ["x", "y"]
        record = NoteRecord(file="a.html", title="A", tags=tags)
        tags.append("z")

        assert record.tags == ("x", "y")

    def test_record_is_frozen(self) -> None:
        record = NoteRecord(file="a.html", title="A", tags=["x"])

        with pytest.raises(FrozenInstanceError):
            record.tags = ("y",)  # type: ignore[misc]
