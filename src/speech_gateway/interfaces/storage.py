"""Abstract interface for the hand-off object storage."""

from abc import ABC, abstractmethod

from speech_gateway.domain.models import RemoteObject


class StorageClient(ABC):
    """Abstract base class for file storage backends bound to one bucket."""

    @abstractmethod
    def upload(
        self, local_path: str, object_name: str, content_type: str
    ) -> RemoteObject:
        """
        Uploads a local file to storage.

        Args:
            local_path: Path of the file on disk.
            object_name: The destination name in the bucket.
            content_type: MIME type of the file.

        Returns:
            The uploaded object, addressable by its URI.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def delete(self, object_name: str) -> None:
        """
        Deletes an object from storage.

        Raises:
            StorageDeleteError: If the deletion fails.
        """
