"""
API Dependencies

Provides dependency injection for services, repositories and the upload
adapter. Repositories are built per request around the request's database
session; the object storage client comes from the application state.
"""

from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.infrastructure.repository import SQLAlchemyRepository
from app.infrastructure.storage import AssetUploader
from app.models.shop import Accessory, Category, Mobile, Product, Service, User
from app.services.core import (
    AccessoryService,
    CategoryService,
    MobileService,
    ProductService,
    RepairService,
    ResourceService,
    UserService,
)


def get_asset_uploader(request: Request) -> AssetUploader:
    """
    Get the image upload adapter

    Returns:
        AssetUploader: Uploader bound to the configured image bucket
    """
    return AssetUploader(request.app.state.object_storage, settings.MINIO_BUCKET)


def user_repository(db: Session) -> SQLAlchemyRepository:
    return SQLAlchemyRepository(db, User, "User", ("name", "email", "place", "contact_number"))


def category_repository(db: Session) -> SQLAlchemyRepository:
    return SQLAlchemyRepository(db, Category, "Category", ("name",))


def get_user_service(
        db: Session = Depends(get_db),
        uploader: AssetUploader = Depends(get_asset_uploader),
) -> UserService:
    return UserService(user_repository(db), uploader)


def get_mobile_service(
        db: Session = Depends(get_db),
        uploader: AssetUploader = Depends(get_asset_uploader),
) -> MobileService:
    repository = SQLAlchemyRepository(
        db, Mobile, "Mobile", ("model_name", "imei", "country", "color", "variant", "brand")
    )
    return MobileService(repository, uploader, user_repository(db))


def get_accessory_service(db: Session = Depends(get_db)) -> AccessoryService:
    repository = SQLAlchemyRepository(db, Accessory, "Accessory", ("name", "brand", "type", "description"))
    return AccessoryService(repository)


def get_repair_service(db: Session = Depends(get_db)) -> RepairService:
    repository = SQLAlchemyRepository(
        db, Service, "Service",
        ("model", "imei", "service_type", "service_cost", "service_charge", "warranty")
    )
    return RepairService(repository, user_repository(db))


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(category_repository(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    repository = SQLAlchemyRepository(db, Product, "Product", ("name",))
    return ProductService(repository, category_repository(db))


def record_id_param(service_dependency: Callable[..., ResourceService]) -> Callable[..., int]:
    """
    Build a path-id dependency for a resource router

    The id is checked before the request body is validated, so a malformed
    id is reported as BadId even when the body is invalid too.
    """

    def parse_record_id(
            item_id: str,
            service: ResourceService = Depends(service_dependency),
    ) -> int:
        return service.parse_id(item_id)

    return parse_record_id


user_id_param = record_id_param(get_user_service)
mobile_id_param = record_id_param(get_mobile_service)
accessory_id_param = record_id_param(get_accessory_service)
service_id_param = record_id_param(get_repair_service)
category_id_param = record_id_param(get_category_service)
product_id_param = record_id_param(get_product_service)
