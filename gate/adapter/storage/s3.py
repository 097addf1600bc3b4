"""S3 file storage.

boto3 clients are synchronous, so every call runs in a worker thread.
"""

import asyncio
from typing import Any
from urllib.parse import quote

import boto3
import logfire
from botocore.exceptions import BotoCoreError, ClientError

from gate.adapter.error import ProviderError
from gate.domain.service.picture_service import FileStorage


class StorageError(ProviderError):
    """The object store failed to store or remove a file."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("s3", message, status_code)


class S3FileStorage(FileStorage):
    """File storage backed by a public-read S3 bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize S3 storage.

        Args:
            bucket: Bucket files are written to
            region: AWS region of the bucket
            access_key_id: Access key; None uses the ambient AWS credentials
            secret_access_key: Secret for ``access_key_id``
            client: Optional boto3 S3 client (tests inject a mock one)
        """
        self.bucket = bucket
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def url_for(self, key: str) -> str:
        return f"https://{self.bucket}.s3.amazonaws.com/{quote(key, safe='')}"

    async def upload(self, key: str, content: bytes, content_type: str) -> str:
        """Upload a publicly readable file and return its URL.

        Raises:
            StorageError: If S3 rejects the upload
        """
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
                ACL="public-read",
            )
        except ClientError as e:
            logfire.error("S3 upload failed", key=key, error=str(e))
            raise StorageError(f"Upload of {key} failed", _status_of(e)) from e
        except BotoCoreError as e:
            logfire.error("S3 upload failed", key=key, error=str(e))
            raise StorageError(f"Upload of {key} failed") from e
        return self.url_for(key)

    async def delete(self, key: str) -> None:
        """Delete a file. Deleting a missing key succeeds.

        Raises:
            StorageError: If S3 rejects the delete
        """
        try:
            await asyncio.to_thread(
                self._client.delete_object, Bucket=self.bucket, Key=key
            )
        except ClientError as e:
            logfire.error("S3 delete failed", key=key, error=str(e))
            raise StorageError(f"Delete of {key} failed", _status_of(e)) from e
        except BotoCoreError as e:
            logfire.error("S3 delete failed", key=key, error=str(e))
            raise StorageError(f"Delete of {key} failed") from e


def _status_of(error: ClientError) -> int | None:
    return error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")


class MockFileStorage(FileStorage):
    """In-process file storage for testing.

    Stored files are kept in ``files`` by key.
    """

    base_url = "https://files.example.com"

    def __init__(self) -> None:
        self.files: dict[str, tuple[bytes, str]] = {}

    async def upload(self, key: str, content: bytes, content_type: str) -> str:
        self.files[key] = (content, content_type)
        return f"{self.base_url}/{key}"

    async def delete(self, key: str) -> None:
        self.files.pop(key, None)
