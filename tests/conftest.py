"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from inkwell.domain.model.post import Post
from inkwell.domain.value import Tag


def pytest_configure(config):
    """Keep telemetry local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


class FixedClock:
    """Clock returning a settable instant, for PostService(clock=...)."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_post(
    title: str | None = "Intro to Caching",
    content_url: str | None = "https://files.example.com/caching.pdf",
    summary: str | None = "cache eviction basics",
    tags: list[str] | None = None,
    **kwargs,
) -> Post:
    """Helper to build candidate posts with valid defaults.

    Args:
        title: Post title
        content_url: Content reference
        summary: Post summary
        tags: Tag names (defaults to ["systems", "caching"])
        **kwargs: Any other Post field (id, created_at, visible, ...)

    Returns:
        Post domain model
    """
    if tags is None:
        tags = ["systems", "caching"]
    return Post(
        title=title,
        content_url=content_url,
        summary=summary,
        tags=[Tag(root=name) for name in tags],
        **kwargs,
    )
