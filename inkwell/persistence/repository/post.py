"""PostgreSQL implementation of Post repository."""

from collections.abc import Sequence
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire
from sqlalchemy import desc, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_posts(self, stmt) -> List[Post]:
        """Run a select over posts_table, newest first."""
        result = await self.session.execute(
            stmt.order_by(desc(posts_table.c.created_at))
        )
        posts = [row_to_post(row._asdict()) for row in result.fetchall()]
        logfire.info("Found posts", count=len(posts))
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_by_title(self, title: Optional[str]) -> Optional[Post]:
        """Find a post by exact title."""
        with logfire.span("post_repository.find_by_title", title=title):
            if title is None:
                return None

            stmt = select(posts_table).where(posts_table.c.title == title)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or replace)."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            tags=post.tag_names,
        ):
            post_dict = post_to_dict(post)
            existing = await self.find_by_id(post.id) if post.id else None

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                    .returning(posts_table)
                )
            else:
                post_id = post.id or PostId(uuid4())
                logfire.info(
                    "Inserting new post",
                    post_id=str(post_id),
                    title=post.title,
                    tags=post.tag_names,
                )
                stmt = (
                    insert(posts_table)
                    .values(id=post_id, **post_dict)
                    .returning(posts_table)
                )

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            saved = row_to_post(row._asdict())
            logfire.info("Post saved successfully", post_id=str(saved.id))
            return saved

    async def find_by_title_or_summary_matching_or_tags_in(
        self,
        title_pattern: str,
        summary_pattern: str,
        tags: Sequence[str],
    ) -> List[Post]:
        """Find posts by title/summary regex (case-insensitive) or shared tag."""
        with logfire.span(
            "post_repository.find_by_title_or_summary_matching_or_tags_in",
            title_pattern=title_pattern,
            summary_pattern=summary_pattern,
            tags=list(tags),
        ):
            stmt = select(posts_table).where(
                or_(
                    posts_table.c.title.regexp_match(title_pattern, flags="i"),
                    posts_table.c.summary.regexp_match(summary_pattern, flags="i"),
                    posts_table.c.tags.overlap(list(tags)),
                )
            )
            return await self._fetch_posts(stmt)

    async def find_by_tags_in(self, tags: Sequence[str]) -> List[Post]:
        """Find posts sharing at least one tag."""
        with logfire.span("post_repository.find_by_tags_in", tags=list(tags)):
            stmt = select(posts_table).where(posts_table.c.tags.overlap(list(tags)))
            return await self._fetch_posts(stmt)

    async def find_by_created_at_between(
        self, start: datetime, end: datetime
    ) -> List[Post]:
        """Find posts created within [start, end]."""
        with logfire.span(
            "post_repository.find_by_created_at_between",
            start=start.isoformat(),
            end=end.isoformat(),
        ):
            stmt = select(posts_table).where(
                posts_table.c.created_at.between(start, end)
            )
            return await self._fetch_posts(stmt)
