"""Mock providers for testing."""

from .facebook import MockFacebookProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockFacebookProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
