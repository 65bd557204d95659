"""Unit tests for row <-> Post mappers."""

from datetime import datetime
from uuid import uuid4

from inkwell.persistence.mappers import post_to_dict, row_to_post
from tests.conftest import make_post


class TestPostMappers:
    """Tests for post mapping."""

    def test_row_to_post_accepts_string_id_and_builds_tags(self):
        """String UUIDs and raw tag arrays should map to domain types."""
        # Arrange
        post_id = uuid4()
        now = datetime(2024, 2, 2, 10, 0)
        row = {
            "id": str(post_id),
            "title": "Intro to Caching",
            "content_url": "https://files.example.com/caching.pdf",
            "summary": "cache eviction basics",
            "tags": ["systems", "caching"],
            "created_at": now,
            "modified_at": now,
            "visible": False,
        }

        # Act
        post = row_to_post(row)

        # Assert
        assert post.id == post_id
        assert post.tag_names == ["systems", "caching"]
        assert post.visible is False

    def test_row_to_post_treats_null_tags_as_empty(self):
        """A NULL tags column maps to no tags."""
        now = datetime(2024, 2, 2, 10, 0)
        row = {
            "id": uuid4(),
            "title": "t",
            "content_url": "u",
            "summary": "s",
            "tags": None,
            "created_at": now,
            "modified_at": now,
            "visible": True,
        }

        assert row_to_post(row).tags == []

    def test_post_to_dict_excludes_id_and_flattens_tags(self):
        """Column values carry plain tag strings and no ID."""
        post = make_post(id=uuid4())

        values = post_to_dict(post)

        assert "id" not in values
        assert values["tags"] == ["systems", "caching"]
        assert values["title"] == "Intro to Caching"
