"""
Generic CRUD service

Every resource runs the same request pipeline:
id check -> validation -> asset limits -> existence check -> reference check ->
uniqueness check -> asset upload -> write -> response envelope.
Each stage raises an AppError that ends the request.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from app.core.exceptions import BadId, Conflict, NotFound
from app.infrastructure.repository import ResourceRepository, build_page, total_pages
from app.infrastructure.response import paginated_response, success_response
from app.infrastructure.storage import UploadedAsset
from app.infrastructure.validation import RequestModel, to_record

logger = logging.getLogger(__name__)


class ResourceService:
    entity: str = "Resource"
    plural: str = "resources"
    # 全局唯一字段，写入前检查冲突
    unique_fields: Tuple[str, ...] = ()
    messages: Dict[str, str] = {}

    def __init__(
            self,
            repository: ResourceRepository,
            references: Optional[Mapping[str, ResourceRepository]] = None,
    ):
        self.repository = repository
        # 外键字段 -> 被引用资源的仓储，写入前确认记录存在
        self.references = dict(references or {})

    def _message(self, key: str, default: str) -> str:
        return self.messages.get(key, default)

    def parse_id(self, raw_id: Any) -> int:
        """路径中的ID必须是ASCII数字串，超出存储范围的ID由仓储视为不存在"""
        text = str(raw_id).strip() if raw_id is not None else ""
        if not (text.isascii() and text.isdigit()):
            raise BadId(self.entity, raw_id)
        return int(text)

    def serialize(self, instance: Any) -> Dict[str, Any]:
        return instance.to_dict()

    def check_assets(self, files: Sequence[UploadedAsset]) -> None:
        """上传前检查文件数量等限制；默认资源不接收文件"""

    async def check_references(self, record: Mapping[str, Any]) -> None:
        for field, repository in self.references.items():
            value = record.get(field)
            if value is None:
                continue
            if await repository.find_by_id(value) is None:
                raise NotFound(repository.entity)

    def conflict_message(self, field: str, value: Any) -> str:
        return f"{self.entity} {field} '{value}' is already in use"

    async def check_conflicts(self, record: Mapping[str, Any], exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            if field not in record or record[field] is None:
                continue
            existing = await self.repository.find_by_unique_field(field, record[field], exclude_id=exclude_id)
            if existing is not None:
                raise Conflict(self.conflict_message(field, record[field]))

    async def attach_assets(
            self,
            record: Dict[str, Any],
            files: Sequence[UploadedAsset],
            partial: bool,
    ) -> Dict[str, Any]:
        """上传文件并把URL写入记录；默认资源不接收文件"""
        return record

    async def create(self, payload: RequestModel, files: Sequence[UploadedAsset] = ()) -> Dict[str, Any]:
        record = to_record(payload)
        self.check_assets(files)
        await self.check_references(record)
        await self.check_conflicts(record)
        record = await self.attach_assets(record, files, partial=False)

        instance = await self.repository.create(record)
        logger.info(f"创建{self.entity}成功: {instance.id}")
        return success_response(
            data=self.serialize(instance),
            message=self._message("created", f"{self.entity} created successfully"),
        )

    async def list_records(self, page: Any = None, limit: Any = None, search: Optional[str] = None) -> Dict[str, Any]:
        window = build_page(page, limit)
        search_filter = self.repository.build_search_filter(search)

        items = await self.repository.find_many(search_filter, window.offset, window.limit)
        total = await self.repository.count(search_filter)

        return paginated_response(
            items=[self.serialize(item) for item in items],
            key=self.plural,
            total=total,
            page=window.page,
            limit=window.limit,
            total_pages=total_pages(total, window.limit),
            message=self._message("listed", f"{self.plural.capitalize()} fetched successfully"),
        )

    async def get(self, record_id: int) -> Dict[str, Any]:
        instance = await self.repository.find_by_id(record_id)
        if instance is None:
            raise NotFound(self.entity)
        return success_response(
            data=self.serialize(instance),
            message=self._message("fetched", f"{self.entity} fetched successfully"),
        )

    async def update(
            self,
            record_id: int,
            payload: RequestModel,
            files: Sequence[UploadedAsset] = (),
    ) -> Dict[str, Any]:
        """
        更新记录

        record_id 已由路由依赖校验；payload 只包含客户端提交的字段，
        未提交的可选字段保持原值
        """
        patch = to_record(payload, partial=True)
        self.check_assets(files)

        if await self.repository.find_by_id(record_id) is None:
            raise NotFound(self.entity)

        await self.check_references(patch)
        await self.check_conflicts(patch, exclude_id=record_id)
        patch = await self.attach_assets(patch, files, partial=True)

        instance = await self.repository.update(record_id, patch)
        logger.info(f"更新{self.entity}成功: {record_id}, 字段: {sorted(patch)}")
        return success_response(
            data=self.serialize(instance),
            message=self._message("updated", f"{self.entity} updated successfully"),
        )

    async def delete(self, record_id: int) -> None:
        if await self.repository.find_by_id(record_id) is None:
            raise NotFound(self.entity)
        await self.repository.delete(record_id)
        logger.info(f"删除{self.entity}成功: {record_id}")
