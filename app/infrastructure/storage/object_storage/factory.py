"""
Object Storage Factory

Builds the image storage adapter from application settings.
"""

from typing import Dict, Optional, Type

from app.core.config import settings
from .base import ObjectStorageInterface, StorageConfig
from .minio_adapter import MinIOAdapter

ADAPTERS: Dict[str, Type[ObjectStorageInterface]] = {
    "minio": MinIOAdapter,
}


class StorageFactory:
    """Factory for the image storage backend"""

    @staticmethod
    def settings_config() -> StorageConfig:
        """Storage configuration read from the MINIO_* settings"""
        return StorageConfig(
            endpoint=settings.MINIO_ENDPOINT,
            access_key=settings.MINIO_ACCESS_KEY,
            secret_key=settings.MINIO_SECRET_KEY,
            secure=settings.MINIO_SECURE,
            image_bucket=settings.MINIO_BUCKET,
            public_url=settings.MINIO_PUBLIC_URL,
        )

    @staticmethod
    def create_storage(
        storage_type: str = "minio",
        config: Optional[StorageConfig] = None
    ) -> ObjectStorageInterface:
        """
        Create a storage adapter

        Args:
            storage_type: Backend name, only "minio" is available
            config: Custom configuration, defaults to the application settings

        Returns:
            ObjectStorageInterface implementation

        Raises:
            ValueError: Unknown backend name
        """
        adapter_cls = ADAPTERS.get(storage_type.lower())
        if adapter_cls is None:
            raise ValueError(f"Unsupported storage type: {storage_type}")
        return adapter_cls(config or StorageFactory.settings_config())

    @staticmethod
    def get_default_storage() -> ObjectStorageInterface:
        return StorageFactory.create_storage("minio")
