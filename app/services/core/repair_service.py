from app.infrastructure.repository import ResourceRepository
from .resource_service import ResourceService


class RepairService(ResourceService):
    """
    维修服务记录

    可选关联顾客（user_id），顾客删除后引用保持不变
    """
    entity = "Service"
    plural = "services"
    messages = {
        "created": "Service Created Successfully",
        "listed": "Services Fetched Successfully",
        "fetched": "Service Fetched Successfully",
        "updated": "Service Updated Successfully",
    }

    def __init__(self, repository: ResourceRepository, user_repository: ResourceRepository):
        super().__init__(repository, references={"user_id": user_repository})
