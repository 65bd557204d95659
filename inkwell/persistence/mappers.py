"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import Post
from inkwell.domain.value import PostId, Tag


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row["title"],
        content_url=row["content_url"],
        summary=row["summary"],
        tags=[Tag(root=name) for name in row.get("tags") or []],
        created_at=row["created_at"],
        modified_at=row["modified_at"],
        visible=row["visible"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database column values.

    The ID is excluded; the repository decides whether to generate one.

    Args:
        post: Post domain model

    Returns:
        Dict of column values
    """
    return {
        "title": post.title,
        "content_url": post.content_url,
        "summary": post.summary,
        "tags": post.tag_names,
        "created_at": post.created_at,
        "modified_at": post.modified_at,
        "visible": post.visible,
    }
