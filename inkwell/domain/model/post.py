"""Post entity.

A post references externally hosted content (``content_url``) and carries
the title, summary and tags that searches run against.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import PostId, Tag


class Post(DomainModel):
    """Post entity.

    Text fields are optional here so incomplete candidates can reach
    PostService, which decides whether they are acceptable:
    - create: title, content_url and summary must be non-blank
    - update: title and summary must be non-blank
    """

    id: Optional[PostId] = None  # Assigned by the store on first insert
    title: Optional[str] = None
    content_url: Optional[str] = None
    summary: Optional[str] = None
    tags: list[Tag] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    visible: bool = True

    @property
    def tag_names(self) -> list[str]:
        """Tags as plain strings, in order."""
        return [tag.root for tag in self.tags]
