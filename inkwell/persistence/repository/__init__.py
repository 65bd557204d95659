"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
