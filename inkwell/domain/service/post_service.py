"""Post domain service."""

import re
from collections.abc import Callable, Sequence
from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Optional

import logfire

from inkwell.config import PostSettings
from inkwell.domain.error import (
    PostAlreadyExistsError,
    PostInvalidDataError,
    PostNotFoundError,
)
from inkwell.domain.model.post import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId

from .base import Service


class RecencyWindow(NamedTuple):
    """Inclusive created_at range queried for recent posts."""

    start: datetime
    end: datetime


def start_of_day(day: date) -> datetime:
    """First instant of the given calendar day."""
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Last representable instant of the given calendar day."""
    return datetime.combine(day, time.max)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _as_date(value: date) -> date:
    # datetime is a subclass of date
    return value.date() if isinstance(value, datetime) else value


class PostService(Service):
    """Domain service for post operations.

    Sole writer of post identifiers (via the repository) and timestamps.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        post_settings: PostSettings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            post_settings: Recent posts query configuration
            clock: Source of the current time
        """
        self.post_repository = post_repository
        self.post_settings = post_settings or PostSettings()
        self._clock = clock

    async def create_post(self, candidate: Post) -> Post:
        """Create a new post.

        The title collision check runs before field validation, so a blank
        post whose title collides is reported as a duplicate.

        Args:
            candidate: Post to create; any ID or timestamps on it are replaced

        Returns:
            Persisted post with its assigned ID

        Raises:
            PostAlreadyExistsError: If a post with the same title exists
            PostInvalidDataError: If title, content_url or summary is blank
        """
        with logfire.span("post_service.create_post", title=candidate.title):
            existing = await self.post_repository.find_by_title(candidate.title)
            if existing:
                logfire.warn(
                    "Post title already taken",
                    title=candidate.title,
                    existing_post_id=str(existing.id),
                )
                raise PostAlreadyExistsError(str(candidate.title))

            if (
                _is_blank(candidate.title)
                or _is_blank(candidate.content_url)
                or _is_blank(candidate.summary)
            ):
                logfire.warn("Post rejected: missing required fields")
                raise PostInvalidDataError(
                    "Title, summary and content URL are required"
                )

            # Single clock read so created_at == modified_at
            now = self._clock()
            post = candidate.model_copy(
                update={"id": None, "created_at": now, "modified_at": now}
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), title=saved.title)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            PostNotFoundError: If no post exists with this ID
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            return await self._require_post(post_id)

    async def search_by_keyword(self, keyword: str) -> list[Post]:
        """Search posts by keyword.

        Matches the keyword as a case-insensitive substring of the title or
        summary, or as an exact (lowercased) tag.

        Args:
            keyword: Search keyword

        Returns:
            Matching posts, possibly empty
        """
        with logfire.span("post_service.search_by_keyword", keyword=keyword):
            lowered = keyword.lower()
            pattern = re.escape(lowered)
            posts = await self.post_repository.find_by_title_or_summary_matching_or_tags_in(
                pattern, pattern, [lowered]
            )
            logfire.info("Keyword search", keyword=keyword, count=len(posts))
            return posts

    async def search_by_tags(self, tags: Optional[Sequence[str]]) -> list[Post]:
        """Find posts carrying at least one of the given tags.

        Args:
            tags: Tag names; None or empty returns no posts without a query

        Returns:
            Matching posts, possibly empty
        """
        if not tags:
            return []

        with logfire.span("post_service.search_by_tags", tags=list(tags)):
            posts = await self.post_repository.find_by_tags_in(list(tags))
            logfire.info("Tag search", tags=list(tags), count=len(posts))
            return posts

    def recency_window(self, from_date: Optional[date] = None) -> RecencyWindow:
        """Derive the created_at range for the recent posts query.

        Without a date, the window runs from the start of the day
        ``recent_window_days`` ago to the end of today. With a date, the
        window is that single day, or that day through today when
        ``recent_range`` is "since".

        Args:
            from_date: Optional day (a datetime is truncated to its date)

        Returns:
            Inclusive window
        """
        today = self._clock().date()

        if from_date is None:
            since = today - timedelta(days=self.post_settings.recent_window_days)
            return RecencyWindow(start_of_day(since), end_of_day(today))

        day = _as_date(from_date)
        if self.post_settings.recent_range == "since":
            return RecencyWindow(start_of_day(day), end_of_day(today))
        return RecencyWindow(start_of_day(day), end_of_day(day))

    async def get_recent_posts(self, from_date: Optional[date] = None) -> list[Post]:
        """Get posts created within the recency window.

        Args:
            from_date: Optional day to restrict the query to

        Returns:
            Posts created inside the window, possibly empty
        """
        window = self.recency_window(from_date)
        with logfire.span(
            "post_service.get_recent_posts",
            start=window.start.isoformat(),
            end=window.end.isoformat(),
            range_mode=self.post_settings.recent_range,
        ):
            posts = await self.post_repository.find_by_created_at_between(
                window.start, window.end
            )
            logfire.info("Recent posts", count=len(posts))
            return posts

    async def update_post(self, post_id: PostId, updated: Post) -> Post:
        """Replace the editable fields of a post.

        Copies title, summary, tags, content_url and visible. The ID and
        created_at are kept; modified_at is taken from the service clock.
        The title is not re-checked for uniqueness and content_url is not
        validated.

        Args:
            post_id: Post ID
            updated: Post carrying the new field values

        Returns:
            Persisted post

        Raises:
            PostNotFoundError: If no post exists with this ID
            PostInvalidDataError: If title or summary is blank
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            existing = await self._require_post(post_id)

            if _is_blank(updated.title):
                logfire.warn("Post update rejected: blank title", post_id=str(post_id))
                raise PostInvalidDataError("Title is required")
            if _is_blank(updated.summary):
                logfire.warn(
                    "Post update rejected: blank summary", post_id=str(post_id)
                )
                raise PostInvalidDataError("Summary is required")

            post = existing.model_copy(
                update={
                    "title": updated.title,
                    "summary": updated.summary,
                    "tags": list(updated.tags),
                    "content_url": updated.content_url,
                    "visible": updated.visible,
                    "modified_at": self._clock(),
                }
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post updated", post_id=str(saved.id), title=saved.title)
            return saved

    async def set_visibility(self, post_id: PostId, visible: bool) -> None:
        """Show or hide a post (soft delete / restore).

        Args:
            post_id: Post ID
            visible: New visibility

        Raises:
            PostNotFoundError: If no post exists with this ID
        """
        with logfire.span(
            "post_service.set_visibility", post_id=str(post_id), visible=visible
        ):
            existing = await self._require_post(post_id)
            await self.post_repository.save(
                existing.model_copy(
                    update={"visible": visible, "modified_at": self._clock()}
                )
            )
            logfire.info("Post visibility set", post_id=str(post_id), visible=visible)

    async def _require_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            logfire.warn("Post not found", post_id=str(post_id))
            raise PostNotFoundError(str(post_id))
        return post
