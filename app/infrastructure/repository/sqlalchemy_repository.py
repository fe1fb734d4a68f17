"""
SQLAlchemy Resource Repository

Implements ResourceRepository on top of a synchronous SQLAlchemy session.
Session calls run in a worker thread so that awaiting them never blocks the
event loop.
"""

import asyncio
import logging
from typing import Any, List, Mapping, Optional, Sequence, Type

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound
from app.db.base import Base
from app.infrastructure.exceptions import StoreError
from .base import ResourceRepository
from .query import build_filter

logger = logging.getLogger(__name__)

# 主键为 Integer 列，超出范围的ID不可能存在
MAX_RECORD_ID = 2 ** 31 - 1
# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_ENTRY = 1062


def is_unique_violation(error: IntegrityError) -> bool:
    """区分唯一约束冲突和外键、非空等其他完整性错误"""
    args = getattr(error.orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(error.orig)


class SQLAlchemyRepository(ResourceRepository):

    def __init__(
            self,
            db: Session,
            model: Type[Base],
            entity: str,
            searchable_fields: Sequence[str] = (),
    ):
        self.db = db
        self.model = model
        self.entity = entity
        self.searchable_fields = tuple(searchable_fields)

    async def find_by_id(self, record_id: int) -> Optional[Any]:
        return await asyncio.to_thread(self._read, self._find_by_id, record_id)

    async def find_by_unique_field(
            self,
            field: str,
            value: Any,
            exclude_id: Optional[int] = None
    ) -> Optional[Any]:
        return await asyncio.to_thread(self._read, self._find_by_unique_field, field, value, exclude_id)

    def build_search_filter(self, search: Optional[str]) -> Any:
        columns = [getattr(self.model, name) for name in self.searchable_fields]
        return build_filter(search, columns)

    async def find_many(self, search_filter: Any, offset: int, limit: int) -> List[Any]:
        return await asyncio.to_thread(self._read, self._find_many, search_filter, offset, limit)

    async def count(self, search_filter: Any) -> int:
        return await asyncio.to_thread(self._read, self._count, search_filter)

    async def create(self, record: Mapping[str, Any]) -> Any:
        return await asyncio.to_thread(self._write, self._create, record)

    async def update(self, record_id: int, patch: Mapping[str, Any]) -> Any:
        return await asyncio.to_thread(self._write, self._update, record_id, patch)

    async def delete(self, record_id: int) -> None:
        await asyncio.to_thread(self._write, self._delete, record_id)

    # ---- 同步实现，在工作线程中执行 ----

    def _find_by_id(self, record_id: int) -> Optional[Any]:
        if not 0 < record_id <= MAX_RECORD_ID:
            return None
        return self.db.get(self.model, record_id)

    def _find_by_unique_field(self, field: str, value: Any, exclude_id: Optional[int]) -> Optional[Any]:
        stmt = select(self.model).where(getattr(self.model, field) == value)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.db.execute(stmt.limit(1)).unique().scalars().first()

    def _find_many(self, search_filter: Any, offset: int, limit: int) -> List[Any]:
        stmt = (
            select(self.model)
            .where(search_filter)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).unique().scalars().all())

    def _count(self, search_filter: Any) -> int:
        stmt = select(func.count()).select_from(self.model).where(search_filter)
        return self.db.execute(stmt).scalar_one()

    def _create(self, record: Mapping[str, Any]) -> Any:
        instance = self.model(**record)
        self.db.add(instance)
        self.db.commit()
        # 刷新以获取自动生成的属性
        self.db.refresh(instance)
        return instance

    def _update(self, record_id: int, patch: Mapping[str, Any]) -> Any:
        instance = self._find_by_id(record_id)
        if instance is None:
            raise NotFound(self.entity)
        for key, value in patch.items():
            setattr(instance, key, value)
        self.db.commit()
        self.db.refresh(instance)
        return instance

    def _delete(self, record_id: int) -> None:
        instance = self._find_by_id(record_id)
        if instance is None:
            raise NotFound(self.entity)
        self.db.delete(instance)
        self.db.commit()

    def _read(self, operation, *args):
        try:
            return operation(*args)
        except SQLAlchemyError as e:
            logger.error(f"❌ 查询{self.entity}失败: {str(e)}")
            raise StoreError(str(e)) from e

    def _write(self, operation, *args):
        try:
            return operation(*args)
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.warning(f"{self.entity}写入违反唯一约束: {e.orig}")
                raise Conflict(f"{self.entity} violates a unique constraint: {e.orig}") from e
            logger.error(f"❌ 写入{self.entity}违反完整性约束: {e.orig}")
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ 写入{self.entity}失败: {str(e)}")
            raise StoreError(str(e)) from e
