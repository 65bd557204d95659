"""Integration tests for PostgresPostRepository.

These tests need a migrated PostgreSQL database at DATABASE__URL and are
skipped otherwise.
"""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_post(**kwargs):
    """Post with a title and tag that no other test run will reuse."""
    marker = uuid4().hex[:12]
    defaults = {
        "title": f"Integration {marker}",
        "summary": f"summary {marker}",
        "tags": [f"tag-{marker}"],
        "created_at": datetime.now(),
        "modified_at": datetime.now(),
    }
    defaults.update(kwargs)
    return make_post(**defaults), marker


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_round_trips(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, _ = _unique_post()

        # Act
        saved = await post_repo.save(post)
        found = await post_repo.find_by_id(saved.id)

        # Assert
        assert saved.id is not None
        assert found is not None
        assert found.title == post.title
        assert found.tag_names == post.tag_names
        assert found.visible is True

    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_when_missing(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)

        # Act
        found = await post_repo.find_by_id(PostId(uuid4()))

        # Assert
        assert found is None

    @pytest.mark.asyncio
    async def test_find_by_title_is_exact(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, _ = _unique_post()
        await post_repo.save(post)

        # Act
        exact = await post_repo.find_by_title(post.title)
        other_case = await post_repo.find_by_title(post.title.upper())

        # Assert
        assert exact is not None
        assert other_case is None

    @pytest.mark.asyncio
    async def test_save_existing_replaces_as_given(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        created_at = datetime.now() - timedelta(days=2)
        post, _ = _unique_post(created_at=created_at, modified_at=created_at)
        saved = await post_repo.save(post)

        # Act
        modified_at = created_at + timedelta(days=1)
        updated = await post_repo.save(
            saved.model_copy(update={"visible": False, "modified_at": modified_at})
        )

        # Assert
        assert updated.id == saved.id
        assert updated.visible is False
        assert updated.created_at == created_at
        assert updated.modified_at == modified_at

    @pytest.mark.asyncio
    async def test_keyword_query_matches_summary_case_insensitively(
        self, integration_env
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, marker = _unique_post(summary=f"Notes on {marker.upper()} eviction")
        saved = await post_repo.save(post)

        # Act
        results = await post_repo.find_by_title_or_summary_matching_or_tags_in(
            marker, marker, [marker]
        )

        # Assert
        assert [p.id for p in results] == [saved.id]

    @pytest.mark.asyncio
    async def test_find_by_tags_in_matches_any_tag(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, marker = _unique_post()
        saved = await post_repo.save(post)

        # Act
        results = await post_repo.find_by_tags_in(["absent-tag", f"tag-{marker}"])

        # Assert
        assert [p.id for p in results] == [saved.id]

    @pytest.mark.asyncio
    async def test_find_by_created_at_between_is_inclusive(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        moment = datetime(1999, 12, 31, 23, 59, 59)
        post, _ = _unique_post(created_at=moment, modified_at=moment)
        saved = await post_repo.save(post)

        # Act
        results = await post_repo.find_by_created_at_between(moment, moment)

        # Assert
        assert saved.id in [p.id for p in results]

    @pytest.mark.asyncio
    async def test_save_existing_accepts_missing_content_url(self, integration_env):
        """Updates may clear content_url; the column must accept NULL."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, _ = _unique_post()
        saved = await post_repo.save(post)

        # Act
        updated = await post_repo.save(saved.model_copy(update={"content_url": None}))
        found = await post_repo.find_by_id(saved.id)

        # Assert
        assert updated.content_url is None
        assert found.content_url is None

    @pytest.mark.asyncio
    async def test_save_accepts_long_title(self, integration_env):
        """Titles are stored without a length limit."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post, marker = _unique_post()
        long_title = f"{marker} " + "caching " * 60

        # Act
        saved = await post_repo.save(post.model_copy(update={"title": long_title}))

        # Assert
        assert (await post_repo.find_by_id(saved.id)).title == long_title
