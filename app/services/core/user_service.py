from typing import Any, Dict, Sequence

from app.infrastructure.repository import ResourceRepository
from app.infrastructure.storage import AssetUploader, UploadedAsset
from .resource_service import ResourceService


class UserService(ResourceService):
    """
    顾客管理服务

    联系电话全局唯一；头像通过 profile_photo 文件字段上传
    """
    entity = "User"
    plural = "users"
    unique_fields = ("contact_number",)
    messages = {
        "created": "New User Created Successfully!",
        "listed": "Users data fetched successfully",
        "fetched": "User fetched successfully",
        "updated": "User updated successfully!",
    }

    def __init__(self, repository: ResourceRepository, uploader: AssetUploader):
        super().__init__(repository)
        self.uploader = uploader

    def conflict_message(self, field: str, value: Any) -> str:
        return f"Contact number {value} is already in use!"

    async def attach_assets(
            self,
            record: Dict[str, Any],
            files: Sequence[UploadedAsset],
            partial: bool,
    ) -> Dict[str, Any]:
        if files:
            record["profile_photo"] = await self.uploader.upload(files[0])
        elif not partial:
            record["profile_photo"] = None
        return record
