"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold the rules that sit between callers and
    repositories: validation, uniqueness checks and derived query inputs.
    """

    pass
