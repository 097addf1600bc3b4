"""Infrastructure providers."""

# Import bases
from .facebook import FacebookProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .facebook import ProdFacebookProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "FacebookProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdFacebookProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
