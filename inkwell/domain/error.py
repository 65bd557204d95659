"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class PostInvalidDataError(DomainError):
    """Raised when a post is missing required data."""

    def __init__(self, message: str):
        super().__init__(message)


class PostAlreadyExistsError(DomainError):
    """Raised when creating a post whose title is already taken."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"A post already exists with title: {title}")


class PostNotFoundError(DomainError):
    """Raised when no post exists at the given identifier."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")
