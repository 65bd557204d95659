"""Post routes."""

from datetime import date, datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, StrictBool

from inkwell.domain.error import (
    PostAlreadyExistsError,
    PostInvalidDataError,
    PostNotFoundError,
)
from inkwell.domain.model import Post
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, Tag

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or replacing a post.

    Required-field checks happen in PostService so that create and update
    can apply their own rules.
    """

    title: str | None = None
    content_url: str | None = None
    summary: str | None = None
    tags: list[str] = []
    visible: bool = True

    def to_post(self) -> Post:
        """Build a candidate post (raises ValueError on bad tags)."""
        return Post(
            title=self.title,
            content_url=self.content_url,
            summary=self.summary,
            tags=[Tag(root=name) for name in self.tags],
            visible=self.visible,
        )


class VisibilityAPIRequest(BaseModel):
    """API request for showing or hiding a post."""

    visible: StrictBool


class PostResponse(BaseModel):
    """Post as returned by the API."""

    id: str
    title: str | None
    content_url: str | None
    summary: str | None
    tags: list[str]
    created_at: datetime | None
    modified_at: datetime | None
    visible: bool

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            content_url=post.content_url,
            summary=post.summary,
            tags=post.tag_names,
            created_at=post.created_at,
            modified_at=post.modified_at,
            visible=post.visible,
        )


def _list_response(posts: list[Post]) -> list[PostResponse] | Response:
    """Serialize a result list, or 204 No Content when it is empty."""
    if not posts:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [PostResponse.from_post(post) for post in posts]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    post_service: FromDishka[PostService],
) -> PostResponse:
    """Create a new post.

    Args:
        request: Post data
        post_service: Post service from DI

    Returns:
        Created post with its ID and timestamps

    Raises:
        HTTPException: 400 on invalid data, 409 if the title is taken
    """
    try:
        created = await post_service.create_post(request.to_post())
        return PostResponse.from_post(created)

    except PostAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (PostInvalidDataError, ValueError) as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("/search", response_model=list[PostResponse])
async def search_posts(
    post_service: FromDishka[PostService],
    keyword: str = Query(),
) -> list[PostResponse] | Response:
    """Search posts by keyword in title, summary or tags.

    Returns:
        Matching posts, or 204 when nothing matches
    """
    posts = await post_service.search_by_keyword(keyword)
    return _list_response(posts)


@router.get("/tags", response_model=list[PostResponse])
async def search_posts_by_tags(
    post_service: FromDishka[PostService],
    tags: list[str] | None = Query(default=None),
) -> list[PostResponse] | Response:
    """Find posts carrying any of the given tags.

    Usage: ``GET /posts/tags?tags=caching&tags=systems``

    Returns:
        Matching posts, or 204 when no tags are given or nothing matches
    """
    posts = await post_service.search_by_tags(tags)
    return _list_response(posts)


@router.get("/recent", response_model=list[PostResponse])
async def get_recent_posts(
    post_service: FromDishka[PostService],
    from_date: date | None = None,
) -> list[PostResponse] | Response:
    """Get recently created posts.

    Without ``from_date`` covers the configured window (30 days by default)
    through today. With ``from_date`` covers that single day.

    Returns:
        Posts in the window, or 204 when there are none
    """
    posts = await post_service.get_recent_posts(from_date)
    return _list_response(posts)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    post_service: FromDishka[PostService],
) -> PostResponse:
    """Get a post by ID.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        post = await post_service.get_post_by_id(PostId(post_id))
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.from_post(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: PostAPIRequest,
    post_service: FromDishka[PostService],
) -> PostResponse:
    """Replace a post's title, summary, tags, content URL and visibility.

    Raises:
        HTTPException: 404 if the post doesn't exist, 400 on invalid data
    """
    try:
        updated = await post_service.update_post(PostId(post_id), request.to_post())
        return PostResponse.from_post(updated)

    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (PostInvalidDataError, ValueError) as e:
        logfire.warn("Post update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.patch("/{post_id}/visibility", status_code=status.HTTP_200_OK)
async def update_post_visibility(
    post_id: UUID,
    request: VisibilityAPIRequest,
    post_service: FromDishka[PostService],
) -> None:
    """Show or hide a post.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        await post_service.set_visibility(PostId(post_id), request.visible)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
