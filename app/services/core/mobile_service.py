from typing import Any, Dict, Sequence

from app.core.exceptions import InvalidValue
from app.infrastructure.repository import ResourceRepository
from app.infrastructure.storage import AssetUploader, UploadedAsset
from .resource_service import ResourceService

MAX_PHOTOS = 10


class MobileService(ResourceService):
    """
    手机库存服务

    最多接收10张图片，上传后的URL按上传顺序保存在 photos 字段
    """
    entity = "Mobile"
    plural = "mobiles"
    messages = {
        "created": "Mobile Created Successfully",
        "listed": "Mobiles fetched successfully",
        "fetched": "Mobile fetched successfully",
        "updated": "Mobile updated successfully!",
    }

    def __init__(
            self,
            repository: ResourceRepository,
            uploader: AssetUploader,
            user_repository: ResourceRepository,
    ):
        super().__init__(repository, references={"user_id": user_repository})
        self.uploader = uploader

    def check_assets(self, files: Sequence[UploadedAsset]) -> None:
        if len(files) > MAX_PHOTOS:
            raise InvalidValue("photos", f"photos accepts at most {MAX_PHOTOS} files")

    async def attach_assets(
            self,
            record: Dict[str, Any],
            files: Sequence[UploadedAsset],
            partial: bool,
    ) -> Dict[str, Any]:
        if files:
            record["photos"] = await self.uploader.upload_many(files)
        elif not partial:
            record["photos"] = None
        return record
