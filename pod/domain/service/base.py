"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold logic spanning several entities or repositories.
    """

    pass
