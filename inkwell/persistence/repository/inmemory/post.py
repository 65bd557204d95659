"""In-memory post repository for testing."""

import re
from collections.abc import Sequence
from datetime import datetime
from typing import Optional
from uuid import uuid4

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Query results keep insertion order.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_title(self, title: Optional[str]) -> Optional[Post]:
        """Find a post by exact title."""
        if title is None:
            return None
        for post in self._posts.values():
            if post.title == title:
                return post
        return None

    async def save(self, post: Post) -> Post:
        """Insert a new post or replace an existing one."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(uuid4())})

        self._posts[post.id] = post
        return post

    async def find_by_title_or_summary_matching_or_tags_in(
        self,
        title_pattern: str,
        summary_pattern: str,
        tags: Sequence[str],
    ) -> list[Post]:
        """Find posts by title/summary regex (case-insensitive) or shared tag."""
        title_re = re.compile(title_pattern, re.IGNORECASE)
        summary_re = re.compile(summary_pattern, re.IGNORECASE)
        wanted = set(tags)

        return [
            post
            for post in self._posts.values()
            if (post.title and title_re.search(post.title))
            or (post.summary and summary_re.search(post.summary))
            or wanted.intersection(post.tag_names)
        ]

    async def find_by_tags_in(self, tags: Sequence[str]) -> list[Post]:
        """Find posts sharing at least one tag."""
        wanted = set(tags)
        return [p for p in self._posts.values() if wanted.intersection(p.tag_names)]

    async def find_by_created_at_between(
        self, start: datetime, end: datetime
    ) -> list[Post]:
        """Find posts created within [start, end]."""
        return [
            p
            for p in self._posts.values()
            if p.created_at is not None and start <= p.created_at <= end
        ]
