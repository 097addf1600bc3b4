"""Facebook identity adapter."""

from .client import (
    FacebookApiError,
    MockFacebookGateway,
    RealFacebookGateway,
)

__all__ = ["FacebookApiError", "MockFacebookGateway", "RealFacebookGateway"]
