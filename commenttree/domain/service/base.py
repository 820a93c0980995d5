"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold the logic that sequences repository calls around
    pure domain helpers such as path encoding and tree assembly.
    """

    pass
