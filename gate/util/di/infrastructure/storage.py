"""File storage infrastructure providers."""

from dishka import Scope, provide

from gate.adapter.storage import S3FileStorage
from gate.config import ConfigurationError, StorageSettings
from gate.domain.service import FileStorage
from gate.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """File storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using S3."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, settings: StorageSettings) -> FileStorage:
        """Provide S3 file storage.

        Raises:
            ConfigurationError: If no bucket is configured
        """
        if not settings.bucket:
            raise ConfigurationError("Storage bucket must be configured")

        return S3FileStorage(
            bucket=settings.bucket,
            region=settings.region,
            access_key_id=settings.access_key_id,
            secret_access_key=settings.secret_access_key,
        )
