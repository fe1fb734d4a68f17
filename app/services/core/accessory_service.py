from typing import Any

from .resource_service import ResourceService


class AccessoryService(ResourceService):
    entity = "Accessory"
    plural = "accessories"
    unique_fields = ("name",)
    messages = {
        "created": "Accessory created successfully",
        "listed": "Accessories fetched successfully",
        "fetched": "Accessory fetched successfully",
        "updated": "Accessory updated successfully",
    }

    def conflict_message(self, field: str, value: Any) -> str:
        return "Accessory name is already in use"
