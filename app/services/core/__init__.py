"""
Core Services Module

CRUD services for the shop resources. All of them share the request
pipeline implemented by ResourceService.
"""

from .resource_service import ResourceService
from .user_service import UserService
from .mobile_service import MobileService
from .accessory_service import AccessoryService
from .repair_service import RepairService
from .catalog_service import CategoryService, ProductService

__all__ = [
    "ResourceService",
    "UserService",
    "MobileService",
    "AccessoryService",
    "RepairService",
    "CategoryService",
    "ProductService",
]
