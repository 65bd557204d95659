"""Domain services."""

from .base import Service
from .post_service import PostService, RecencyWindow

__all__ = [
    "PostService",
    "RecencyWindow",
    "Service",
]
