"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold rules that span entities (tags and the questions
    that use them) and run against repositories passed in by the caller.
    """
