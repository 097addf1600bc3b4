"""Profile picture storage domain service."""

from uuid import uuid4

import logfire

from gate.domain.value import AccountId, StoredFile

from .base import Service

# Accepted picture content types and the file extension stored for each
PICTURE_CONTENT_TYPES = {
    "image/png": "png",
    "image/jpg": "jpg",
    "image/jpeg": "jpeg",
}


class FileStorage:
    """Object storage interface for uploaded files."""

    async def upload(self, key: str, content: bytes, content_type: str) -> str:
        """Store ``content`` under ``key``.

        Returns:
            Public URL of the stored file
        """
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        """Remove the file stored under ``key``."""
        raise NotImplementedError


class PictureService(Service):
    """Domain service storing profile pictures."""

    def __init__(self, file_storage: FileStorage) -> None:
        """Initialize picture service.

        Args:
            file_storage: Object storage implementation
        """
        self.file_storage = file_storage

    async def upload(
        self, account_id: AccountId, content: bytes, content_type: str
    ) -> StoredFile:
        """Store a new picture for an account under a fresh key.

        Raises:
            ValueError: If ``content_type`` is not an accepted picture type
        """
        extension = PICTURE_CONTENT_TYPES.get(content_type)
        if extension is None:
            raise ValueError(f"Unsupported picture type: {content_type}")

        key = f"{account_id}_{uuid4().hex}.{extension}"
        with logfire.span("picture_service.upload", account_id=account_id, key=key):
            url = await self.file_storage.upload(key, content, content_type)
            logfire.info("Picture stored", account_id=account_id, size=len(content))
            return StoredFile(key=key, url=url)

    async def delete(self, stored: StoredFile) -> None:
        """Remove a stored picture."""
        with logfire.span("picture_service.delete", key=stored.key):
            await self.file_storage.delete(stored.key)
