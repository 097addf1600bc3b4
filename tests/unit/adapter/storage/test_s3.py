"""Unit tests for S3FileStorage."""

from unittest.mock import MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError
import pytest

from gate.adapter.error import ProviderError
from gate.adapter.storage import S3FileStorage, StorageError


def client_error(status_code: int, operation: str) -> ClientError:
    return ClientError(
        {
            "Error": {"Code": "AccessDenied", "Message": "Access Denied"},
            "ResponseMetadata": {"HTTPStatusCode": status_code},
        },
        operation,
    )


class TestS3FileStorage:
    """Tests for S3FileStorage."""

    @pytest.mark.asyncio
    async def test_upload_puts_public_object(self):
        """Should upload with the content type and return the public URL."""
        # Arrange
        client = MagicMock()
        storage = S3FileStorage(bucket="pictures", client=client)

        # Act
        url = await storage.upload("acc_1/a b.png", b"png-bytes", "image/png")

        # Assert
        client.put_object.assert_called_once_with(
            Bucket="pictures",
            Key="acc_1/a b.png",
            Body=b"png-bytes",
            ContentType="image/png",
            ACL="public-read",
        )
        assert url == "https://pictures.s3.amazonaws.com/acc_1%2Fa%20b.png"

    @pytest.mark.asyncio
    async def test_upload_rejected_by_s3(self):
        client = MagicMock()
        client.put_object.side_effect = client_error(403, "PutObject")
        storage = S3FileStorage(bucket="pictures", client=client)

        with pytest.raises(StorageError) as exc_info:
            await storage.upload("acc_1/a.png", b"png-bytes", "image/png")

        assert isinstance(exc_info.value, ProviderError)
        assert exc_info.value.provider == "s3"
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_upload_connection_failure(self):
        client = MagicMock()
        client.put_object.side_effect = EndpointConnectionError(endpoint_url="https://s3")
        storage = S3FileStorage(bucket="pictures", client=client)

        with pytest.raises(StorageError) as exc_info:
            await storage.upload("acc_1/a.png", b"png-bytes", "image/png")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_delete_removes_object(self):
        client = MagicMock()
        storage = S3FileStorage(bucket="pictures", client=client)

        await storage.delete("acc_1/a.png")

        client.delete_object.assert_called_once_with(Bucket="pictures", Key="acc_1/a.png")

    @pytest.mark.asyncio
    async def test_delete_rejected_by_s3(self):
        client = MagicMock()
        client.delete_object.side_effect = client_error(500, "DeleteObject")
        storage = S3FileStorage(bucket="pictures", client=client)

        with pytest.raises(StorageError):
            await storage.delete("acc_1/a.png")
