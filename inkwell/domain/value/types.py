"""Domain value objects for Inkwell."""

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject

TAG_MIN_LENGTH = 3
TAG_MAX_LENGTH = 20


class Tag(RootValueObject[str]):
    """Tag attached to a post.

    Free-form token of 3-20 characters. Examples: 'caching', 'systems', 'física'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_length(cls, v: str) -> str:
        """Validate tag length."""
        if not TAG_MIN_LENGTH <= len(v) <= TAG_MAX_LENGTH:
            raise ValueError(
                f"Tag must be {TAG_MIN_LENGTH}-{TAG_MAX_LENGTH} characters: {v!r}"
            )
        return v
