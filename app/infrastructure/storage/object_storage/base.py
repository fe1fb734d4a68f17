"""
Object Storage Abstract Base Classes

Defines the interface for object storage implementations used to host
uploaded images (MinIO, AWS S3, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional, BinaryIO, Union
from dataclasses import dataclass


@dataclass
class StorageConfig:
    """Configuration for object storage services"""
    endpoint: str
    access_key: str
    secret_key: str
    secure: bool = True
    region: Optional[str] = None

    # Bucket holding public images
    image_bucket: str = "mobile-shop-images"
    # Base URL clients use to fetch objects; derived from endpoint when empty
    public_url: Optional[str] = None


class ObjectStorageInterface(ABC):
    """
    Abstract interface for object storage operations

    This interface defines the contract that all object storage
    implementations must follow, enabling easy switching between
    different providers.
    """

    def __init__(self, config: StorageConfig):
        self.config = config

    @abstractmethod
    def ensure_bucket_exists(self, bucket_name: str) -> bool:
        """
        Ensure bucket exists, create if it doesn't

        Args:
            bucket_name: Name of the bucket

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    def upload_file_object(
        self,
        file_data: Union[bytes, BinaryIO],
        bucket_name: str,
        object_name: str,
        content_type: Optional[str] = None
    ) -> bool:
        """
        Upload file object (bytes or stream) to storage

        Args:
            file_data: File content as bytes or binary stream
            bucket_name: Target bucket name
            object_name: Object name in storage
            content_type: MIME content type

        Returns:
            True once the object is stored

        Raises:
            Exception: the provider error when the upload fails
        """
        pass

    @abstractmethod
    def get_public_url(self, bucket_name: str, object_name: str) -> str:
        """
        Public (non-expiring) URL of an object

        Args:
            bucket_name: Source bucket name
            object_name: Object name in storage

        Returns:
            URL string
        """
        pass

    @abstractmethod
    def initialize(self) -> bool:
        """
        Initialize storage service (create required buckets, etc.)

        Returns:
            True if successful, False otherwise
        """
        pass
