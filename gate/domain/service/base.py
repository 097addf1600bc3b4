"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the logic that spans an account and the systems around it
    (Facebook, token signing, storage) and is stateless per request.
    """

    pass
