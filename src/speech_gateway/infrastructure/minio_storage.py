"""MinIO implementation of the StorageClient interface."""

from minio import Minio

from speech_gateway.domain.models import RemoteObject
from speech_gateway.exceptions import StorageDeleteError, StorageUploadError
from speech_gateway.interfaces import StorageClient
from speech_gateway.logging import setup_logging

logger = setup_logging()


class MinioStorage(StorageClient):
    """
    Handles hand-off storage through an S3-compatible endpoint.

    Pointed at storage.googleapis.com with HMAC keys, objects land in a Google
    Cloud Storage bucket and are addressable by the recognition API as gs:// URIs.
    """

    def __init__(self, client: Minio, bucket_name: str, uri_scheme: str = "gs"):
        self._client = client
        self._bucket_name = bucket_name
        self._uri_scheme = uri_scheme

    def upload(
        self, local_path: str, object_name: str, content_type: str
    ) -> RemoteObject:
        try:
            self._client.fput_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                file_path=local_path,
                content_type=content_type,
            )
        except Exception as e:
            logger.exception(
                "Storage upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

        remote = RemoteObject(
            bucket_name=self._bucket_name,
            object_name=object_name,
            uri_scheme=self._uri_scheme,
        )
        logger.info(
            "File uploaded to storage",
            extra={"uri": remote.uri, "content_type": content_type},
        )
        return remote

    def delete(self, object_name: str) -> None:
        try:
            self._client.remove_object(
                bucket_name=self._bucket_name, object_name=object_name
            )
            logger.info(
                "Object deleted from storage",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
        except Exception as e:
            logger.exception(
                "Storage delete failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageDeleteError(object_name, e) from e
