"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business logic that spans several entities or
    repositories, such as the invitation workflow and notification fan-out.
    """

    pass
