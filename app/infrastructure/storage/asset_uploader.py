import asyncio
import logging
import os
import uuid
from dataclasses import dataclass
from typing import List, Optional, Sequence

from app.infrastructure.exceptions import MissingAssetData, UploadFailed
from .object_storage import ObjectStorageInterface

logger = logging.getLogger(__name__)


@dataclass
class UploadedAsset:
    """上传文件的内存表示"""
    filename: Optional[str]
    content: Optional[bytes]
    content_type: Optional[str] = None


class AssetUploader:
    """
    图片上传适配器

    将内存中的文件上传到对象存储并返回公开访问URL。
    多文件上传并发执行，任意一个失败则整批失败（已上传的对象不做清理）。
    """

    def __init__(self, storage: ObjectStorageInterface, bucket_name: str):
        self.storage = storage
        self.bucket_name = bucket_name

    @staticmethod
    def _check_asset(asset: Optional[UploadedAsset]) -> None:
        if asset is None or not asset.content:
            name = asset.filename if asset is not None else None
            raise MissingAssetData(f"File buffer is missing for uploaded file {name or ''}".strip())

    @staticmethod
    def _object_name(asset: UploadedAsset) -> str:
        ext = os.path.splitext(asset.filename or "")[1].lower()
        return f"{uuid.uuid4().hex}{ext}"

    async def _put(self, asset: UploadedAsset) -> str:
        object_name = self._object_name(asset)
        try:
            await asyncio.to_thread(
                self.storage.upload_file_object,
                asset.content,
                self.bucket_name,
                object_name,
                asset.content_type,
            )
        except Exception as e:
            logger.error(f"❌ 图片上传失败 {asset.filename}: {str(e)}")
            raise UploadFailed(str(e)) from e
        return self.storage.get_public_url(self.bucket_name, object_name)

    async def upload(self, asset: Optional[UploadedAsset]) -> str:
        """
        上传单个文件

        Args:
            asset: 上传的文件

        Returns:
            str: 公开访问URL

        Raises:
            MissingAssetData: 文件内容为空
            UploadFailed: 对象存储上传失败
        """
        self._check_asset(asset)
        return await self._put(asset)

    async def upload_many(self, assets: Sequence[UploadedAsset]) -> List[str]:
        """并发上传多个文件，返回的URL顺序与输入一致"""
        for asset in assets:
            self._check_asset(asset)

        results = await asyncio.gather(*[self._put(asset) for asset in assets], return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result

        logger.info(f"已上传{len(results)}张图片")
        return list(results)
