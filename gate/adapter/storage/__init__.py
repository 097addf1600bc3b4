"""Object storage adapter for uploaded files."""

from .s3 import MockFileStorage, S3FileStorage, StorageError

__all__ = ["MockFileStorage", "S3FileStorage", "StorageError"]
