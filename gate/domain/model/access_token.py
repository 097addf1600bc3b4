"""Access token issued after a successful login."""

from typing import ClassVar

from gate.domain.model.common import DomainModel


class AccessToken(DomainModel):
    """Signed bearer credential.

    The value is opaque to everyone but the JWT service.
    """

    expiration_in_ms: ClassVar[int] = 30 * 60 * 1000

    value: str
