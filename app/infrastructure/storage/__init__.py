"""
Storage Infrastructure Module

Provides the object storage adapters and the image upload adapter built on
top of them.
"""

from .asset_uploader import AssetUploader, UploadedAsset
from . import object_storage

__all__ = [
    'AssetUploader',
    'UploadedAsset',
    'object_storage'
]
