"""Post repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from typing import List, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entities.

    A plain query executor: validation, uniqueness and timestamping belong
    to PostService. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_title(self, title: Optional[str]) -> Optional[Post]:
        """Find a post by exact (case-sensitive) title.

        Args:
            title: The title to look up

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        A post without an ID is inserted and assigned a new ID. A post with
        an ID replaces the stored record as given, timestamps included.

        Args:
            post: The post to save

        Returns:
            The persisted post
        """
        pass

    @abstractmethod
    async def find_by_title_or_summary_matching_or_tags_in(
        self,
        title_pattern: str,
        summary_pattern: str,
        tags: Sequence[str],
    ) -> List[Post]:
        """Find posts matching a title or summary pattern, or sharing a tag.

        Args:
            title_pattern: Regular expression matched case-insensitively
                anywhere in the title
            summary_pattern: Regular expression matched case-insensitively
                anywhere in the summary
            tags: Tag names; a post carrying any of them matches

        Returns:
            Union of the three matches, each post at most once
        """
        pass

    @abstractmethod
    async def find_by_tags_in(self, tags: Sequence[str]) -> List[Post]:
        """Find posts carrying at least one of the given tags.

        Args:
            tags: Tag names to match

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def find_by_created_at_between(
        self, start: datetime, end: datetime
    ) -> List[Post]:
        """Find posts created within an inclusive time range.

        Args:
            start: Range start (inclusive)
            end: Range end (inclusive)

        Returns:
            Posts with start <= created_at <= end
        """
        pass
