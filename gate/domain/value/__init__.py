"""Domain value objects for Gate."""

from gate.domain.value.identifiers import AccountId
from gate.domain.value.types import FacebookIdentity, StoredFile, normalize_email

__all__ = [
    # Identifiers
    "AccountId",
    # Types
    "FacebookIdentity",
    "StoredFile",
    "normalize_email",
]
