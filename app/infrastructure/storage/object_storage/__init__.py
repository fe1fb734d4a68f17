"""
Object Storage Infrastructure Module

Provides abstracted object storage interfaces for hosting uploaded images.
"""

from .base import ObjectStorageInterface, StorageConfig
from .minio_adapter import MinIOAdapter
from .factory import StorageFactory

__all__ = [
    'ObjectStorageInterface',
    'StorageConfig',
    'MinIOAdapter',
    'StorageFactory'
]
