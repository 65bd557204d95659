"""Unit tests for the Post entity and Tag value object."""

import pytest
from pydantic import ValidationError

from inkwell.domain.model.post import Post
from inkwell.domain.value import Tag


class TestTag:
    """Tests for Tag validation."""

    @pytest.mark.parametrize("name", ["abc", "x" * 20, "física", "nonexistent-tag"])
    def test_tag_within_bounds_is_accepted(self, name):
        """Tags of 3-20 characters should be valid."""
        assert Tag(root=name).root == name

    @pytest.mark.parametrize("name", ["", "ab", "x" * 21])
    def test_tag_outside_bounds_is_rejected(self, name):
        """Tags shorter than 3 or longer than 20 characters should fail."""
        with pytest.raises(ValidationError, match="3-20 characters"):
            Tag(root=name)

    def test_tag_serializes_as_plain_string(self):
        """Tags should dump to their string value."""
        post = Post(title="t", tags=[Tag(root="systems")])
        assert post.model_dump()["tags"] == ["systems"]


class TestPost:
    """Tests for Post defaults."""

    def test_new_post_defaults(self):
        """A candidate post has no ID or timestamps and is visible."""
        post = Post(title="Intro to Caching")

        assert post.id is None
        assert post.created_at is None
        assert post.modified_at is None
        assert post.visible is True
        assert post.tags == []

    def test_long_title_is_accepted(self):
        """Titles have no length bound."""
        title = "Caching " * 100

        assert Post(title=title).title == title

    def test_post_with_invalid_tag_is_rejected(self):
        """Building a post with a bad tag should fail."""
        with pytest.raises(ValidationError):
            Post(title="Intro to Caching", tags=["ok-tag", "no"])

    def test_post_is_immutable(self):
        """Posts are frozen; changes go through model_copy."""
        post = Post(title="Intro to Caching")

        with pytest.raises(ValidationError):
            post.visible = False

        assert post.model_copy(update={"visible": False}).visible is False
