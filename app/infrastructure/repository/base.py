"""
Resource repository interface

Defines the store operations the resource services need so that the
services never talk to the ORM directly.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional


class ResourceRepository(ABC):
    """
    Abstract store access for one resource type

    ``update`` and ``delete`` raise ``NotFound`` when the record is missing;
    write-time constraint violations surface as ``Conflict``.
    """

    entity: str = "Resource"

    @abstractmethod
    async def find_by_id(self, record_id: int) -> Optional[Any]:
        pass

    @abstractmethod
    async def find_by_unique_field(
            self,
            field: str,
            value: Any,
            exclude_id: Optional[int] = None
    ) -> Optional[Any]:
        """
        Find a record holding ``value`` in a unique column

        Args:
            field: Column name
            value: Value to look for
            exclude_id: Record to ignore, used when updating

        Returns:
            The conflicting record or None
        """
        pass

    @abstractmethod
    def build_search_filter(self, search: Optional[str]) -> Any:
        """Store filter matching ``search`` in any searchable field"""
        pass

    @abstractmethod
    async def find_many(self, search_filter: Any, offset: int, limit: int) -> List[Any]:
        """Page of records matching the filter, newest first"""
        pass

    @abstractmethod
    async def count(self, search_filter: Any) -> int:
        pass

    @abstractmethod
    async def create(self, record: Mapping[str, Any]) -> Any:
        pass

    @abstractmethod
    async def update(self, record_id: int, patch: Mapping[str, Any]) -> Any:
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> None:
        pass
