"""Domain model entities for Inkwell."""

from inkwell.domain.model.post import Post

__all__ = [
    "Post",
]
