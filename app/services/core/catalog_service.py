from typing import Any

from app.infrastructure.repository import ResourceRepository
from .resource_service import ResourceService


class CategoryService(ResourceService):
    entity = "Category"
    plural = "categories"
    unique_fields = ("name",)
    messages = {
        "created": "New Category Created Successfully!",
        "listed": "Category data fetched successfully",
        "fetched": "Category fetched successfully",
        "updated": "Category updated successfully!",
    }

    def conflict_message(self, field: str, value: Any) -> str:
        return f"{value} already exists!"


class ProductService(ResourceService):
    """商品服务，每个商品必须属于一个已存在的分类"""
    entity = "Product"
    plural = "products"
    messages = {
        "created": "Product Created Successfully",
        "listed": "Products fetched successfully",
        "fetched": "Product fetched successfully",
        "updated": "Product updated successfully!",
    }

    def __init__(self, repository: ResourceRepository, category_repository: ResourceRepository):
        super().__init__(repository, references={"category_id": category_repository})
