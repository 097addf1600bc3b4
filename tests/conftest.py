"""Test configuration and fixtures."""

import pytest

from gate.config import AuthSettings
from gate.domain.value import FacebookIdentity


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(jwt_secret="any_secret", jwt_algorithm="HS256")


@pytest.fixture
def facebook_identity() -> FacebookIdentity:
    """Profile data for Alice as Facebook would return it."""
    return FacebookIdentity(
        provider_id="fb_1",
        name="Alice",
        email="alice@x.com",
        picture_url="http://x/a.png",
    )
