"""Domain value objects for Gate."""

from gate.domain.value.common import ValueObject


def normalize_email(email: str) -> str:
    """Normalize an email for lookups and storage.

    Surrounding whitespace is dropped and the whole address is lowercased.
    Every repository applies this on both load and save.
    """
    return email.strip().lower()


class FacebookIdentity(ValueObject):
    """Profile data Facebook returns for a presented client token."""

    provider_id: str  # Facebook user ID
    name: str
    email: str
    picture_url: str | None = None


class StoredFile(ValueObject):
    """A file kept in object storage."""

    key: str
    url: str
