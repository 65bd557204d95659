"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import PostId
from inkwell.domain.value.types import TAG_MAX_LENGTH, TAG_MIN_LENGTH, Tag

__all__ = [
    # Identifiers
    "PostId",
    # Types
    "Tag",
    "TAG_MAX_LENGTH",
    "TAG_MIN_LENGTH",
]
