"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """An identity provider failed in a way that is not the user's fault.

    Attributes:
        provider: Provider name, e.g. ``facebook``
        status_code: HTTP status the provider answered with, if any
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")
