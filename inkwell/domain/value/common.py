"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable value object wrapping a single primitive (accessed via .root).

    model_dump() returns the primitive itself, so wrapped values serialize
    as plain JSON strings or numbers.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
